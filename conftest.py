"""
Root conftest — clears TIMEISH_* environment variables before any package
module is imported so the Settings singleton is built from its defaults
during test collection regardless of the developer's shell.
"""
import os

for _name in [k for k in os.environ if k.startswith("TIMEISH_")]:
    del os.environ[_name]
