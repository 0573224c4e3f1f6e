# packages/zk_embed/config.py
import os

# Domain separator for PROGRAM_HASH derivation
DS_PROGRAM_DEFAULT = "NONOS:ZK:PROGRAM:v1"
CONST_PREFIX_DEFAULT = "PROGRAM"

DS_PROGRAM = os.getenv("ZK_EMBED_DS_PROGRAM", DS_PROGRAM_DEFAULT)
CONST_PREFIX = os.getenv("ZK_EMBED_CONST_PREFIX", CONST_PREFIX_DEFAULT)
LOG_LEVEL = os.getenv("ZK_EMBED_LOG_LEVEL", "WARNING").upper()
