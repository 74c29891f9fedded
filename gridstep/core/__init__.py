# gridstep/core/__init__.py
