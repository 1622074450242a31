"""
Tests for Books API Endpoints

This module tests CRUD operations for /books and /book/{id}, and how a
book's nested author and publisher are resolved.

TEST NAMING CONVENTION:
- test_<action>_<scenario>
- Examples: test_create_book_reuses_existing_author, test_get_book_not_found
"""

from fastapi import status


class TestListBooks:
    """Tests for GET /books endpoint."""

    def test_list_books_empty(self, client):
        response = client.get("/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_books_with_data(self, client, sample_book):
        """Test listing books embeds author and publisher."""
        response = client.get("/books/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["title"] == "The Hobbit"
        assert data[0]["author"]["name"] == "J.R.R. Tolkien"
        assert data[0]["publisher"]["name"] == "Allen & Unwin"


class TestGetBook:
    """Tests for GET /book/{book_id} endpoint."""

    def test_get_book_success(self, client, sample_book, sample_author, sample_publisher):
        response = client.get(f"/book/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": sample_book.id,
            "title": "The Hobbit",
            "author": {"id": sample_author.id, "name": "J.R.R. Tolkien"},
            "publisher": {
                "id": sample_publisher.id,
                "name": "Allen & Unwin",
                "address": "London",
                "phone": "020 7946 0000",
            },
        }

    def test_get_book_not_found(self, client):
        response = client.get("/book/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Book not found"}


class TestCreateBook:
    """Tests for POST /book endpoint (create-or-reuse)."""

    def test_create_book_title_only(self, client):
        """Test creating a book with no author or publisher."""
        response = client.post("/book", params={"title": "Beowulf"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == "Beowulf"
        assert data["author"] is None
        assert data["publisher"] is None

    def test_create_book_reuses_existing_author(self, client, sample_author):
        """Test that a stored author is reused whatever name is sent."""
        response = client.post(
            "/book",
            params={"title": "The Silmarillion"},
            json={"author": {"id": sample_author.id, "name": "Someone Else"}},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["author"] == {
            "id": sample_author.id,
            "name": "J.R.R. Tolkien",
        }
        assert len(client.get("/authors").json()) == 1

    def test_create_book_creates_missing_author(self, client, sample_author):
        """Test that an unknown author ID creates a new author from the name."""
        response = client.post(
            "/book/",
            params={"title": "Notes on the Analytical Engine"},
            json={"author": {"id": 99999, "name": "Ada"}},
        )

        assert response.status_code == status.HTTP_201_CREATED
        author = response.json()["author"]
        assert author["name"] == "Ada"
        assert author["id"] != sample_author.id

        authors = client.get("/authors").json()
        assert {"id": author["id"], "name": "Ada"} in authors
        assert len(authors) == 2

    def test_create_book_author_without_id(self, client):
        """Test that an author with only a name is created."""
        response = client.post(
            "/book",
            params={"title": "Frankenstein"},
            json={"author": {"name": "Mary Shelley"}},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["author"]["name"] == "Mary Shelley"

    def test_create_book_reuses_existing_publisher(self, client, sample_publisher):
        response = client.post(
            "/book",
            params={"title": "Farmer Giles of Ham"},
            json={"publisher": {"id": sample_publisher.id, "name": "Ignored", "phone": "000"}},
        )

        assert response.status_code == status.HTTP_201_CREATED
        publisher = response.json()["publisher"]
        assert publisher["id"] == sample_publisher.id
        assert publisher["name"] == "Allen & Unwin"
        assert publisher["phone"] == "020 7946 0000"

    def test_create_book_creates_missing_publisher(self, client):
        """Test that an unknown publisher is created with address and phone."""
        response = client.post(
            "/book",
            params={"title": "Dune"},
            json={
                "publisher": {
                    "id": 42,
                    "name": "Chilton Books",
                    "address": "Philadelphia",
                    "phone": "555-0000",
                }
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        publisher = response.json()["publisher"]
        assert publisher["name"] == "Chilton Books"
        assert publisher["address"] == "Philadelphia"
        assert publisher["phone"] == "555-0000"
        assert len(client.get("/publishers").json()) == 1

    def test_create_book_with_both_references(self, client, sample_author):
        response = client.post(
            "/book",
            params={"title": "The Two Towers"},
            json={
                "author": {"id": sample_author.id},
                "publisher": {"name": "Allen & Unwin"},
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["author"]["id"] == sample_author.id
        assert data["publisher"]["name"] == "Allen & Unwin"

        # The created book can be read back unchanged
        assert client.get(f"/book/{data['id']}").json() == data

    def test_create_book_empty_reference_rejected(self, client):
        """Test that an author with neither id nor name is rejected."""
        response = client.post(
            "/book",
            params={"title": "Anonymous"},
            json={"author": {}},
        )

        assert response.status_code == 422

    def test_create_book_missing_title(self, client):
        response = client.post("/book")

        assert response.status_code == 422

    def test_create_book_blank_title(self, client):
        response = client.post("/book", params={"title": "   "})

        assert response.status_code == 422
        assert client.get("/books").json() == []

    def test_create_book_strips_title(self, client):
        response = client.post("/book", params={"title": "  Beowulf  "})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["title"] == "Beowulf"

    def test_create_book_unknown_author_id_without_name(self, client):
        """Test that an author that would have to be created needs a name."""
        response = client.post(
            "/book",
            params={"title": "Orphan"},
            json={"author": {"id": 99999}},
        )

        assert response.status_code == 422
        assert client.get("/authors").json() == []
        assert client.get("/books").json() == []

    def test_create_book_unknown_publisher_id_without_name(self, client):
        response = client.post(
            "/book",
            params={"title": "Orphan"},
            json={"publisher": {"id": 99999, "address": "Nowhere"}},
        )

        assert response.status_code == 422
        assert client.get("/publishers").json() == []
        assert client.get("/books").json() == []

    def test_create_book_nameless_publisher_creates_no_author(self, client):
        """Test that a rejected publisher does not leave a new author behind."""
        response = client.post(
            "/book",
            params={"title": "Orphan"},
            json={"author": {"name": "Ada"}, "publisher": {"id": 99999}},
        )

        assert response.status_code == 422
        assert client.get("/authors").json() == []

    def test_create_book_known_author_id_without_name(self, client, sample_author):
        """Test that a stored author is reused even when no name is sent."""
        response = client.post(
            "/book",
            params={"title": "Unfinished Tales"},
            json={"author": {"id": sample_author.id}},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["author"]["name"] == "J.R.R. Tolkien"


class TestUpdateBook:
    """Tests for PUT /book/{book_id} endpoint (must-exist references)."""

    def test_update_book_title_keeps_references(self, client, sample_book):
        """Test that null author/publisher leave the stored references alone."""
        response = client.put(
            f"/book/{sample_book.id}",
            json={"title": "There and Back Again", "author": None, "publisher": None},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "There and Back Again"
        assert data["author"]["name"] == "J.R.R. Tolkien"
        assert data["publisher"]["name"] == "Allen & Unwin"

    def test_update_book_omitted_references(self, client, sample_book):
        response = client.put(f"/book/{sample_book.id}/", json={"title": "The Hobbit"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["author"] is not None

    def test_update_book_reassigns_author(self, client, sample_book, second_author):
        """Test that the stored author is used and other input fields ignored."""
        response = client.put(
            f"/book/{sample_book.id}",
            json={
                "title": "The Hobbit",
                "author": {"id": second_author.id, "name": "Not Her Name"},
            },
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["author"] == {
            "id": second_author.id,
            "name": "Ursula K. Le Guin",
        }

    def test_update_book_reassigns_publisher(self, client, sample_book, second_publisher):
        response = client.put(
            f"/book/{sample_book.id}",
            json={"title": "The Hobbit", "publisher": {"id": second_publisher.id}},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["publisher"]["name"] == "Ace Books"

    def test_update_book_unknown_author(self, client, sample_book):
        """Test that an unknown author fails and leaves the book unmodified."""
        before = client.get(f"/book/{sample_book.id}").json()

        response = client.put(
            f"/book/{sample_book.id}",
            json={"title": "Changed", "author": {"id": 99999, "name": "Nobody"}},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Author not found"}
        assert client.get(f"/book/{sample_book.id}").json() == before

    def test_update_book_unknown_publisher(self, client, sample_book, second_author):
        """Test that a valid author is not applied when the publisher is unknown."""
        before = client.get(f"/book/{sample_book.id}").json()

        response = client.put(
            f"/book/{sample_book.id}",
            json={
                "title": "Changed",
                "author": {"id": second_author.id},
                "publisher": {"id": 99999},
            },
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Publisher not found"}
        assert client.get(f"/book/{sample_book.id}").json() == before

    def test_update_book_author_without_id(self, client, sample_book):
        """Test that a reference without an ID cannot match a stored author."""
        response = client.put(
            f"/book/{sample_book.id}",
            json={"title": "The Hobbit", "author": {"name": "J.R.R. Tolkien"}},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Author not found"

    def test_update_book_not_found(self, client):
        response = client.put("/book/99999", json={"title": "Anything"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Book not found"

    def test_update_book_blank_title(self, client, sample_book):
        response = client.put(f"/book/{sample_book.id}", json={"title": "  "})

        assert response.status_code == 422


class TestDeleteBook:
    """Tests for DELETE /book/{book_id} endpoint."""

    def test_delete_book_success(self, client, sample_book):
        """Test deleting a book leaves its author and publisher in place."""
        response = client.delete(f"/book/{sample_book.id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/book/{sample_book.id}").status_code == 404
        assert len(client.get("/authors").json()) == 1
        assert len(client.get("/publishers").json()) == 1

    def test_delete_book_not_found_is_noop(self, client, sample_book):
        response = client.delete("/book/99999/")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert len(client.get("/books").json()) == 1
