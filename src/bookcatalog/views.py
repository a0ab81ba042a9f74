# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# views.py
import logging

from flask import (
    Blueprint, current_app, redirect, render_template, request, url_for
)

from . import store
from .composer import BookNotFoundError, compose_book_detail
from .forms import BookForm

logger = logging.getLogger(__name__)

books = Blueprint('books', __name__)

RATING_FAILED = 'rating_failed'


def get_ratings_client():
    return current_app.extensions['ratings_client']


def book_not_found(book_id):
    logger.info('Book %s not found', book_id)
    return render_template('error.html', title='Not Found',
                           message='Book not found'), 404


@books.route('/')
def book_list():
    return render_template('book-list.html', title='Books',
                           books=store.find_all())


@books.route('/books/<int:book_id>')
def book_show(book_id):
    try:
        detail = compose_book_detail(book_id, get_ratings_client())
    except BookNotFoundError:
        return book_not_found(book_id)
    return render_template('book-show.html', title=detail.book.title,
                           book=detail.book, ratings=detail.ratings,
                           rating_failed=request.args.get('error') == RATING_FAILED)


@books.route('/books/<int:book_id>/ratings', methods=['POST'])
def create_rating(book_id):
    value = request.form.get('value')
    email = request.form.get('email')
    if get_ratings_client().submit_rating(book_id, value, email):
        return redirect(url_for('books.book_show', book_id=book_id))
    return redirect(url_for('books.book_show', book_id=book_id,
                            error=RATING_FAILED))


@books.route('/book/add', methods=['GET', 'POST'])
def book_add():
    form = BookForm()
    if form.validate_on_submit():
        store.create(form.book_fields())
        return redirect(url_for('books.book_list'))
    return render_template('book-add.html', title='Add Book', form=form,
                           errors=form.error_messages())


@books.route('/book/edit/<int:book_id>', methods=['GET', 'POST'])
def book_edit(book_id):
    book = store.find_by_id(book_id)
    if book is None:
        return book_not_found(book_id)
    form = BookForm(obj=book)
    if form.validate_on_submit():
        store.update(book_id, form.book_fields())
        return redirect(url_for('books.book_list'))
    return render_template('book-edit.html', title='Edit Book', form=form,
                           book_id=book_id, errors=form.error_messages())


@books.route('/book/delete/<int:book_id>', methods=['GET', 'POST'])
def book_delete(book_id):
    book = store.find_by_id(book_id)
    if book is None:
        return book_not_found(book_id)
    if request.method == 'POST':
        store.delete(book_id)
        return redirect(url_for('books.book_list'))
    return render_template('book-delete.html', title='Delete Book', book=book)
