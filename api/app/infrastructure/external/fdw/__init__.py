"""
Gestion de un servidor remoto via postgres_fdw.

Mantiene un unico FOREIGN SERVER (y su USER MAPPING para CURRENT_USER)
alineado con la configuracion del proceso:
- Si no existe, lo crea.
- Si la configuracion cambio (segun su hash), lo actualiza.
- Si no cambio nada, no ejecuta DDL.

El hash de la ultima configuracion aplicada se guarda en la tabla
_fdw_config_meta de la base local.
"""
