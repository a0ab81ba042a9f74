# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance
# with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND,
# either express or implied. See the License for the specific
# language governing permissions and limitations under the License.

"""
Rating aggregate and book detail dataclasses shared by the ratings
client, the detail composer and the views.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class RatingAggregate:
    """
    Summary of a book's ratings as reported by the ratings service.

    Attributes:
        average (float): Average rating, 0 when there are no ratings.
        ratings (List[Dict]): Individual rating entries in service order.
        degraded (bool): True when this is a stand-in for data that could
            not be fetched. Not part of equality.
    """

    average: float = 0.0
    ratings: List[Dict[str, Any]] = field(default_factory=list)
    degraded: bool = field(default=False, compare=False)

    @classmethod
    def default(cls, degraded: bool = False) -> "RatingAggregate":
        """
        The aggregate used whenever real rating data is unobtainable.
        """
        return cls(average=0.0, ratings=[], degraded=degraded)

    @classmethod
    def from_payload(cls, payload) -> "RatingAggregate":
        """
        Build an aggregate from the ratings service JSON body.

        Raises:
            ValueError: If the payload does not have the expected shape.
        """
        if not isinstance(payload, dict):
            raise ValueError("Ratings payload must be a JSON object.")
        if "average" not in payload or "ratings" not in payload:
            raise ValueError("Ratings payload is missing 'average' or 'ratings'.")

        average = payload["average"]
        ratings = payload["ratings"]
        if isinstance(average, bool) or not isinstance(average, (int, float)):
            raise ValueError(f"Invalid average rating: {average!r}")
        if not isinstance(ratings, list):
            raise ValueError(f"Invalid ratings list: {ratings!r}")

        try:
            average = float(average)
        except OverflowError as e:
            raise ValueError("Average rating is out of range.") from e

        return cls(average=average, ratings=list(ratings))

    @property
    def count(self) -> int:
        return len(self.ratings)


@dataclass
class BookDetail:
    """
    A book record merged with its rating aggregate.

    Attributes:
        book: The Book Store record.
        ratings (RatingAggregate): Ratings fetched for the book, or the
            default aggregate.
    """
    book: Any
    ratings: RatingAggregate
