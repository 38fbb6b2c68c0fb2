"""HTTP tests for /authors."""

import pytest


def create_author(client, name="Ada", **extra):
    return client.post("/authors", json={"name": name, **extra})


class TestCreateAuthor:
    def test_created(self, client):
        resp = create_author(client, " Ada ", bio="Analyst")
        assert resp.status_code == 201
        assert resp.get_json() == {"id": 1, "name": "Ada", "bio": "Analyst"}

    def test_bio_omitted_when_absent(self, client):
        assert create_author(client).get_json() == {"id": 1, "name": "Ada"}

    def test_missing_name(self, client):
        resp = client.post("/authors", json={"bio": "x"})
        assert resp.status_code == 400
        assert resp.get_json() == {
            "error": 'Author validation failed: "name" is required (non-empty string).'
        }

    def test_malformed_json(self, client):
        resp = client.post("/authors", data="{not json", content_type="application/json")
        assert resp.status_code == 400

    def test_duplicate_name(self, client):
        create_author(client, "Ada")
        resp = create_author(client, "ADA")
        assert resp.status_code == 409
        assert resp.get_json() == {"error": "Author already exists."}
        assert len(client.get("/authors").get_json()) == 1


class TestReadAuthors:
    def test_list(self, client):
        create_author(client, "B")
        create_author(client, "A")
        assert [a["name"] for a in client.get("/authors").get_json()] == ["B", "A"]

    def test_get(self, client):
        create_author(client)
        assert client.get("/authors/1").get_json()["name"] == "Ada"

    def test_get_missing(self, client):
        resp = client.get("/authors/3")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Author not found."}

    @pytest.mark.parametrize("raw_id", ["abc", "-1", "0", "1.5"])
    def test_unmatched_ids_use_the_entity_message(self, client, raw_id):
        create_author(client)
        for resp in (
            client.get(f"/authors/{raw_id}"),
            client.put(f"/authors/{raw_id}", json={"name": "X"}),
            client.delete(f"/authors/{raw_id}"),
            client.get(f"/authors/{raw_id}/books"),
        ):
            assert resp.status_code == 404
            assert resp.get_json() == {"error": "Author not found."}

    def test_whole_number_path_id(self, client):
        create_author(client)
        assert client.get("/authors/1.0").get_json()["name"] == "Ada"

    def test_books_of_author(self, client):
        create_author(client)
        client.post("/books", json={"title": "Notes", "authorId": 1, "year": 1843})
        resp = client.get("/authors/1/books")
        assert resp.status_code == 200
        assert resp.get_json() == [{"id": 1, "title": "Notes", "year": 1843, "authorId": 1}]

    def test_books_of_missing_author(self, client):
        assert client.get("/authors/1/books").status_code == 404


class TestUpdateAuthor:
    def test_update(self, client):
        create_author(client, bio="old")
        resp = client.put("/authors/1", json={"name": "Ada King"})
        assert resp.status_code == 200
        assert resp.get_json() == {"id": 1, "name": "Ada King"}

    def test_update_missing(self, client):
        assert client.put("/authors/9", json={"name": "X"}).status_code == 404

    def test_update_invalid(self, client):
        create_author(client)
        assert client.put("/authors/1", json={"name": ""}).status_code == 400

    def test_update_conflict(self, client):
        create_author(client, "Ada")
        create_author(client, "Grace")
        resp = client.put("/authors/2", json={"name": "ada"})
        assert resp.status_code == 409
        assert resp.get_json() == {"error": "Another author with the same name exists."}


class TestDeleteAuthor:
    def test_delete_cascades_to_books(self, client):
        create_author(client, "Ada")
        create_author(client, "Grace")
        client.post("/books", json={"title": "Notes", "authorId": 1})
        client.post("/books", json={"title": "COBOL", "authorId": 2})

        resp = client.delete("/authors/1")
        assert resp.status_code == 200
        assert resp.get_json() == {"deleted": {"id": 1, "name": "Ada"}}
        assert [b["title"] for b in client.get("/books").get_json()] == ["COBOL"]
        assert client.get("/authors/1/books").status_code == 404

    def test_delete_missing(self, client):
        resp = client.delete("/authors/1")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Author not found."}
