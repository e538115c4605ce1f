# isinfo/catalog.py
"""
Static reference catalogs

These lists are baked into the program and define what the report
compares the live interpreter against. Configuration may replace or
extend them (see isinfo.config.loader).
"""

from __future__ import annotations

from typing import Final, Tuple


# Placeholder for any value the host could not report
UNKNOWN: Final[str] = "نامشخص"

# Version shown for an add-on that is not loaded
NO_VERSION: Final[str] = "-"

# Status labels for boolean facts and add-on cards
STATUS_ACTIVE: Final[str] = "فعال"
STATUS_INACTIVE: Final[str] = "غیرفعال"


# Capability modules an operator usually cares about on a shared host:
# optional C extensions of the standard library (missing when the
# interpreter was built without the matching system library) and common
# third-party accelerators / drivers.
KNOWN_MODULES: Final[Tuple[str, ...]] = tuple(sorted([
    # stdlib extension modules
    "_asyncio", "_bz2", "_csv", "_ctypes", "_curses", "_datetime", "_dbm",
    "_decimal", "_elementtree", "_gdbm", "_hashlib", "_json", "_lzma",
    "_multiprocessing", "_pickle", "_posixsubprocess", "_socket",
    "_sqlite3", "_ssl", "_struct", "_tkinter", "_uuid", "_zoneinfo",
    "array", "binascii", "fcntl", "grp", "math", "mmap", "pyexpat",
    "readline", "resource", "select", "syslog", "termios", "unicodedata",
    "zlib",
    # third-party
    "Cython", "MySQLdb", "PIL", "cryptography", "gevent", "greenlet",
    "grpc", "httptools", "lxml", "markupsafe", "msgpack", "numpy",
    "orjson", "psycopg2", "pyarmor", "pymemcache", "pymysql", "redis",
    "sqlalchemy", "ujson", "uvloop", "yaml",
]))


# Callables whose availability is a risk in shared hosting: process
# execution, privilege changes, raw sockets, code evaluation.
DANGEROUS_FUNCTIONS: Final[Tuple[str, ...]] = (
    "os.system",
    "os.popen",
    "os.execv",
    "os.execve",
    "os.execvp",
    "os.spawnv",
    "os.spawnve",
    "os.fork",
    "os.forkpty",
    "os.kill",
    "os.killpg",
    "os.setuid",
    "os.setgid",
    "os.setsid",
    "os.setpgid",
    "os.mkfifo",
    "os.symlink",
    "os.link",
    "os.chroot",
    "os.uname",
    "subprocess.Popen",
    "subprocess.run",
    "subprocess.call",
    "subprocess.check_call",
    "subprocess.check_output",
    "socket.socket",
    "socket.socketpair",
    "socket.create_server",
    "socket.create_connection",
    "pty.spawn",
    "ctypes.CDLL",
    "eval",
    "exec",
    "compile",
    "pickle.loads",
    "marshal.loads",
)


__all__ = [
    "UNKNOWN",
    "NO_VERSION",
    "STATUS_ACTIVE",
    "STATUS_INACTIVE",
    "KNOWN_MODULES",
    "DANGEROUS_FUNCTIONS",
]
