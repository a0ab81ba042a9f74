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

'''HTTP client for the ratings service'''
import logging
import requests

from bookcatalog.utils.config import (
    Config,
    USER_AGENT
)
from bookcatalog.utils.log import (
    log_exec_time
)
from bookcatalog.utils.models import RatingAggregate

# Configure logging
logger = logging.getLogger(__name__)


class RatingsClient:
    '''
    Reads and writes per-book ratings on the ratings service.

    ``GET {base_url}/ratings/{book_id}`` returns the aggregate for a book
    or 404 when the book has no ratings. ``POST {base_url}/ratings/{book_id}``
    with ``value`` and ``email`` query parameters records a rating.
    '''

    def __init__(self, base_url: str = Config.RATINGS_SERVICE_URL,
                 timeout: float = Config.RATINGS_TIMEOUT_SECONDS,
                 session: requests.Session = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers['User-Agent'] = USER_AGENT

    def _ratings_url(self, book_id) -> str:
        return f'{self.base_url}/ratings/{book_id}'

    @log_exec_time(logger)
    def fetch_aggregate(self, book_id) -> RatingAggregate:
        '''
        Fetch the rating aggregate for a book.

        Never raises. A 404 means the book has no ratings yet and yields
        the default aggregate. Any other failure is logged and yields the
        default aggregate flagged as degraded.
        '''
        url = self._ratings_url(book_id)
        try:
            response = self.session.get(url, timeout=self.timeout)
            if response.status_code == 404:
                logger.info('No ratings found for book %s', book_id)
                return RatingAggregate.default()
            response.raise_for_status()
            return RatingAggregate.from_payload(response.json())
        except requests.RequestException as e:
            logger.error('Error fetching ratings for book %s: %s', book_id, e)
        except (ValueError, TypeError) as e:
            logger.error('Malformed ratings response for book %s: %s',
                         book_id, e)
        except Exception as e:
            logger.error('Unexpected error fetching ratings for book %s: %s',
                         book_id, e)
        return RatingAggregate.default(degraded=True)

    @log_exec_time(logger)
    def submit_rating(self, book_id, value, email) -> bool:
        '''
        Forward a rating to the ratings service.

        Returns:
            bool: True when the service accepted the rating.
        '''
        url = self._ratings_url(book_id)
        try:
            response = self.session.post(
                url,
                params={'value': value, 'email': email},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error('Error creating rating for book %s: %s', book_id, e)
            return False
        logger.debug('Rating recorded for book %s', book_id)
        return True
