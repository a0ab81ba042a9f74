# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

""" Shared fixture: an app on an in-memory database with a mocked ratings client """
import unittest
from datetime import date
from unittest.mock import Mock

from bookcatalog.app import create_app
from bookcatalog.store import db
from bookcatalog import store
from bookcatalog.utils.models import RatingAggregate

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "WTF_CSRF_ENABLED": False,
    "SECRET_KEY": "test-secret",
    "LOG_LEVEL": "WARNING",
}

DUNE = {
    "title": "Dune",
    "author": "Frank Herbert",
    "release_date": date(1965, 8, 1),
    "page_count": 412,
    "publisher": "Chilton",
}


class CatalogTestCase(unittest.TestCase):
    """Builds a fresh app and database for every test."""

    config_overrides = {}

    def setUp(self):
        self.ratings_client = Mock()
        self.ratings_client.fetch_aggregate.return_value = RatingAggregate.default()
        self.ratings_client.submit_rating.return_value = True
        self.app = create_app(
            {**TEST_CONFIG, **self.config_overrides},
            ratings_client=self.ratings_client,
        )
        self.client = self.app.test_client()
        self.ctx = self.app.app_context()
        self.ctx.push()

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.ctx.pop()

    def add_book(self, **fields):
        return store.create({**DUNE, **fields})
