#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Streamlit launcher with UTF-8 forced (Windows consoles default to a legacy code page).
"""
import os
import sys

os.environ['PYTHONUTF8'] = '1'
os.environ['PYTHONIOENCODING'] = 'utf-8'

if sys.platform == 'win32':
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8', errors='replace')

if __name__ == '__main__':
    import streamlit.web.cli as stcli

    sys.argv = ["streamlit", "run", "main.py", "--server.headless", "true"]
    sys.exit(stcli.main())
