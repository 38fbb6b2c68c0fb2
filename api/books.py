from __future__ import annotations

from flask import Blueprint, request, jsonify

from . import get_storage, parse_id
from models.book_query import query_books
from models.schemas.book import BookOutSchema, validate_book_payload

bp = Blueprint("books", __name__)

book_out_schema = BookOutSchema()
books_out_schema = BookOutSchema(many=True)


@bp.post("/books")
def create_book():
    """
    Create a new book
    ---
    tags:
      - Books
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, authorId]
          properties:
            title: { type: string }
            year: { type: integer }
            authorId: { type: integer }
    responses:
      201:
        description: Created
      400:
        description: Validation error or unknown authorId
      409:
        description: Same title already exists for this author
    """
    storage = get_storage()
    data = validate_book_payload(request.get_json(silent=True), storage.authors)
    book = storage.books.create(data["title"], data["author_id"], data["year"])
    return jsonify(book_out_schema.dump(book)), 201


@bp.get("/books")
def list_books():
    """
    List books with filtering, sorting and pagination
    ---
    tags:
      - Books
    parameters:
      - in: query
        name: title
        type: string
        description: "Case-insensitive substring of the title"
      - in: query
        name: author
        type: string
        description: "Case-insensitive substring of the author name"
      - in: query
        name: year
        type: integer
      - in: query
        name: sort
        type: string
        description: "<field>_<asc|desc>. Allowed fields: title, year, id, authorId"
      - in: query
        name: limit
        type: integer
        description: "Page size; no pagination when omitted"
      - in: query
        name: page
        type: integer
        default: 1
    responses:
      200:
        description: List of books
    """
    storage = get_storage()
    rows = query_books(storage.books.all(), storage.authors.list(), request.args)
    return jsonify(books_out_schema.dump(rows))


@bp.get("/books/<book_id>")
def get_book(book_id: str):
    """
    Get a single book by id
    ---
    tags:
      - Books
    parameters:
      - in: path
        name: book_id
        type: integer
        required: true
    responses:
      200:
        description: Book found
      404:
        description: Not found
    """
    book_id = parse_id(book_id)
    return jsonify(book_out_schema.dump(get_storage().books.get(book_id)))


@bp.put("/books/<book_id>")
def update_book(book_id: str):
    """
    Replace a book's title, year and author
    ---
    tags:
      - Books
    consumes:
      - application/json
    parameters:
      - in: path
        name: book_id
        type: integer
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, authorId]
          properties:
            title: { type: string }
            year: { type: integer }
            authorId: { type: integer }
    responses:
      200:
        description: Updated
      400:
        description: Validation error or unknown authorId
      404:
        description: Not found
      409:
        description: Same title already exists for this author
    """
    book_id = parse_id(book_id)
    storage = get_storage()
    data = validate_book_payload(request.get_json(silent=True), storage.authors)
    book = storage.books.update(book_id, data["title"], data["author_id"], data["year"])
    return jsonify(book_out_schema.dump(book))


@bp.delete("/books/<book_id>")
def delete_book(book_id: str):
    """
    Delete a book
    ---
    tags:
      - Books
    parameters:
      - in: path
        name: book_id
        type: integer
        required: true
    responses:
      200:
        description: "Deleted; body is {deleted: Book}"
      404:
        description: Not found
    """
    book_id = parse_id(book_id)
    book = get_storage().books.delete(book_id)
    return jsonify({"deleted": book_out_schema.dump(book)})
