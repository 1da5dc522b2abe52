import os
import time

# Debug logging
DEBUG = os.environ.get('MTRXFALL_DEBUG', '0') in ('1', 'true', 'True')
LOG_PATH = '/tmp/mtrxfall.log'


def log(msg: str):
    if not DEBUG:
        return
    try:
        with open(LOG_PATH, 'a') as f:
            f.write(f"[{time.strftime('%Y-%m-%d %H:%M:%S')}] {msg}\n")
    except OSError:
        pass
