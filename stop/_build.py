# Generated at build time by build_backend/stop_build_config.py. Do not edit.
COLORED = False
