# gridstep/app/__init__.py
