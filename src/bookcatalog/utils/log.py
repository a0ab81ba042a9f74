# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Logging helper functions
"""
import logging
import time as perftime
import functools

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level="INFO"):
    """
    Configure the root logger once for the whole application.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def log_exec_time(logger):
    """
    Log the execution time of the decorated function at DEBUG level.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = perftime.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                execution_time = perftime.perf_counter() - start_time
                logger.debug("[%s] Execution time: %.4f seconds",
                             func.__name__, execution_time)
        return wrapper
    return decorator
