from __future__ import annotations

from flask import Blueprint, request, jsonify

from . import get_storage, parse_id
from models.schemas.author import AuthorOutSchema, validate_author_payload
from models.schemas.book import BookOutSchema

bp = Blueprint("authors", __name__)

out_schema = AuthorOutSchema()
out_list_schema = AuthorOutSchema(many=True)
books_out_schema = BookOutSchema(many=True)


@bp.post("/authors")
def create_author():
    """
    Create an author
    ---
    tags: [Authors]
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [name]
          properties:
            name: { type: string }
            bio: { type: string }
    responses:
      201: { description: Created }
      400: { description: Validation error }
      409: { description: An author with the same name exists }
    """
    data = validate_author_payload(request.get_json(silent=True))
    author = get_storage().authors.create(data["name"], data["bio"])
    return jsonify(out_schema.dump(author)), 201


@bp.get("/authors")
def list_authors():
    """
    List authors in creation order
    ---
    tags: [Authors]
    responses:
      200: { description: OK }
    """
    return jsonify(out_list_schema.dump(get_storage().authors.list()))


@bp.get("/authors/<author_id>")
def get_author(author_id: str):
    """
    Get an author by id
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: integer
        required: true
    responses:
      200: { description: OK }
      404: { description: Not found }
    """
    author_id = parse_id(author_id)
    return jsonify(out_schema.dump(get_storage().authors.get(author_id)))


@bp.put("/authors/<author_id>")
def update_author(author_id: str):
    """
    Replace an author's name and bio
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: integer
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [name]
          properties:
            name: { type: string }
            bio: { type: string }
    responses:
      200: { description: OK }
      400: { description: Validation error }
      404: { description: Not found }
      409: { description: Another author has this name }
    """
    author_id = parse_id(author_id)
    data = validate_author_payload(request.get_json(silent=True))
    author = get_storage().authors.update(author_id, data["name"], data["bio"])
    return jsonify(out_schema.dump(author))


@bp.delete("/authors/<author_id>")
def delete_author(author_id: str):
    """
    Delete an author and every book written by them
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: integer
        required: true
    responses:
      200: { description: "Deleted; body is {deleted: Author}" }
      404: { description: Not found }
    """
    author_id = parse_id(author_id)
    author = get_storage().authors.delete(author_id)
    return jsonify({"deleted": out_schema.dump(author)})


@bp.get("/authors/<author_id>/books")
def list_author_books(author_id: str):
    """
    List the books of one author
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: integer
        required: true
    responses:
      200: { description: OK }
      404: { description: Author not found }
    """
    author_id = parse_id(author_id)
    return jsonify(books_out_schema.dump(get_storage().books.list_by_author(author_id)))
