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

""" Book submission form and its validation rules """
import re
from datetime import date
from typing import List

from flask_wtf import FlaskForm
from wtforms import StringField
from wtforms.validators import InputRequired, Length, ValidationError

PAGE_COUNT_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)


def _parse_date(value: str) -> date:
    return date.fromisoformat(value.strip())


def _parse_page_count(value: str) -> int:
    value = value.strip()
    if not PAGE_COUNT_PATTERN.match(value):
        raise ValueError(f"Not an integer: {value!r}")
    page_count = int(value)
    if page_count < 0:
        raise ValueError("Page count must not be negative")
    return page_count


class ParsesAs:
    """
    Validates that the raw field value converts with ``parser``.
    """

    def __init__(self, parser, message: str):
        self.parser = parser
        self.message = message

    def __call__(self, form, field):
        try:
            self.parser(field.data)
        except (TypeError, ValueError) as e:
            raise ValidationError(self.message) from e


class BookForm(FlaskForm):
    """
    Create/edit form for a book. Fields are posted as ``title``,
    ``author``, ``releaseDate``, ``pageCount`` and ``publisher``.
    """

    title = StringField("Title", validators=[
        InputRequired("Please provide a value for Title"),
        Length(max=255, message="Title must not be more than 255 characters long"),
    ])
    author = StringField("Author", validators=[
        InputRequired("Please provide a value for Author"),
        Length(max=100, message="Author must not be more than 100 characters long"),
    ])
    release_date = StringField("Release Date", name="releaseDate", validators=[
        InputRequired("Please provide a value for Release Date"),
        ParsesAs(_parse_date, "Please provide a valid date for Release Date"),
    ])
    page_count = StringField("Page Count", name="pageCount", validators=[
        InputRequired("Please provide a value for Page Count"),
        ParsesAs(_parse_page_count, "Please provide a valid integer for Page Count"),
    ])
    publisher = StringField("Publisher", validators=[
        InputRequired("Please provide a value for Publisher"),
        Length(max=100, message="Publisher must not be more than 100 characters long"),
    ])

    def error_messages(self) -> List[str]:
        """All violation messages, in field order."""
        messages = []
        for field in (self.title, self.author, self.release_date,
                      self.page_count, self.publisher):
            messages.extend(field.errors)
        return messages

    def book_fields(self) -> dict:
        """Typed values for the book store. Call after ``validate``."""
        return {
            "title": self.title.data,
            "author": self.author.data,
            "release_date": _parse_date(self.release_date.data),
            "page_count": _parse_page_count(self.page_count.data),
            "publisher": self.publisher.data,
        }
