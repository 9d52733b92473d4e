# yavml/config.py
import os

import numpy as np

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)

# Level name for the "yavml" logger, e.g. DEBUG to trace lossy casts.
LOG_LEVEL = os.environ.get("YAVML_LOG_LEVEL", "WARNING")
