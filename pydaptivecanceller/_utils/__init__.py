# pydaptivecanceller/_utils/__init__.py
