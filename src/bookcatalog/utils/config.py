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

""" Config settings for the book catalog and the ratings dependency """
USER_AGENT = "bookcatalog/1.0"
ENV_PREFIX = "BOOKCATALOG"
_SECRET_NAMES = ("SECRET_KEY",)


class Config:
    """
    Configuration settings for the web app, the book store and the
    ratings service client. Allows dynamic updates to the values.
    """

    # === Flask ===
    SECRET_KEY = "change-this-secret-in-production"
    WTF_CSRF_ENABLED = True
    LOG_LEVEL = "INFO"

    # === Book Store ===
    SQLALCHEMY_DATABASE_URI = "sqlite:///bookcatalog.db"
    CREATE_TABLES_ON_STARTUP = True

    # === Ratings Service ===
    RATINGS_SERVICE_URL = "http://localhost:5001"
    RATINGS_TIMEOUT_SECONDS = 3.0

    @classmethod
    def set_value(cls, name: str, value):
        """
        Set the value of a class variable.

        Args:
            name (str): The name of the class variable to update.
            value: The new value for the variable.
        """
        if hasattr(cls, name):
            setattr(cls, name, value)
        else:
            raise AttributeError(f"{name} is not a valid configuration option.")

    @classmethod
    def get_value(cls, name: str):
        """
        Get the value of a class variable.

        Args:
            name (str): The name of the class variable.

        Returns:
            The value of the class variable.
        """
        if hasattr(cls, name):
            return getattr(cls, name)
        else:
            raise AttributeError(f"{name} is not a valid configuration option.")

    @classmethod
    def constants(cls) -> dict:
        """Returns all uppercase settings as a dict."""
        return {name: getattr(cls, name) for name in dir(cls) if name.isupper()}

    @classmethod
    def log_all_constants(cls) -> str:
        """
        Returns all constants as a formatted string. Secret values are
        masked.

        Returns:
            str: A string containing all constants with their names and values.
        """
        constants_list = []
        constants_list.append("===== Configs =====\n")
        for name, value in sorted(cls.constants().items()):
            if name in _SECRET_NAMES:
                value = "****"
            constants_list.append(f"{name}: {value}")
        return "\n".join(constants_list)
