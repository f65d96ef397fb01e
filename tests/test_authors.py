from fastapi import status


class TestAuthorEndpoints:
    """Test author management endpoints."""

    def test_create_author_success(self, test_client):
        """Test successful author creation."""
        response = test_client.post("/api/authors", json={"name": "Ursula K. Le Guin"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Ursula K. Le Guin"
        assert isinstance(data["id"], int) and data["id"] > 0
        assert "createdAt" in data
        assert "updatedAt" in data
        assert "bookCount" not in data
        assert "books" not in data

    def test_create_author_assigns_unique_ids(self, test_client):
        """Test that every created author gets a fresh id."""
        ids = {
            test_client.post("/api/authors", json={"name": name}).json()["id"]
            for name in ("One", "Two", "Three")
        }
        assert len(ids) == 3

    def test_create_author_trim_name(self, test_client):
        """Test that author name is trimmed."""
        response = test_client.post("/api/authors", json={"name": "  Trimmed Name  "})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["name"] == "Trimmed Name"

    def test_create_author_empty_name(self, test_client):
        """Test creating author with empty name."""
        response = test_client.post("/api/authors", json={"name": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["type"] == "validation_error"
        assert "name cannot be empty" in response.text.lower()

    def test_create_author_missing_name(self, test_client):
        """Test creating author without a name."""
        response = test_client.post("/api/authors", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert test_client.get("/api/authors").json() == []

    def test_create_author_non_string_name(self, test_client):
        """Test that a non-string name is a validation error, not a crash."""
        response = test_client.post("/api/authors", json={"name": 42})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_authors_empty(self, test_client):
        """Test listing authors when none exist."""
        response = test_client.get("/api/authors")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_authors_with_book_counts(self, test_client, sample_author, sample_book):
        """Test that listed authors carry their book count."""
        other = test_client.post("/api/authors", json={"name": "No Books Yet"}).json()

        response = test_client.get("/api/authors")

        assert response.status_code == status.HTTP_200_OK
        counts = {a["id"]: a["bookCount"] for a in response.json()}
        assert counts == {sample_author["id"]: 1, other["id"]: 0}

    def test_get_author_with_books(self, test_client, sample_author, sample_book):
        """Test fetching an author includes its books."""
        response = test_client.get(f"/api/authors/{sample_author['id']}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == sample_author["name"]
        assert [b["id"] for b in data["books"]] == [sample_book["id"]]
        assert data["books"][0]["title"] == sample_book["title"]
        assert data["books"][0]["authorId"] == sample_author["id"]

    def test_get_author_not_found(self, test_client):
        """Test fetching a missing author."""
        response = test_client.get("/api/authors/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        error = response.json()["error"]
        assert error["type"] == "not_found"
        assert error["message"] == "Author not found"

    def test_get_author_invalid_id(self, test_client):
        """Test that non-integer and non-positive ids are caller errors."""
        for bad_id in ("abc", "-1", "0", "1.5"):
            response = test_client.get(f"/api/authors/{bad_id}")
            assert response.status_code == status.HTTP_400_BAD_REQUEST, bad_id
            assert response.json()["error"]["type"] == "validation_error"

    def test_update_author_success(self, test_client, sample_author):
        """Test renaming an author."""
        response = test_client.put(
            f"/api/authors/{sample_author['id']}", json={"name": "Augusta Ada King"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_author["id"]
        assert data["name"] == "Augusta Ada King"
        assert data["createdAt"] == sample_author["createdAt"]

    def test_update_author_not_found(self, test_client):
        """Test updating a missing author."""
        response = test_client.put("/api/authors/999", json={"name": "Nobody"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_author_empty_name(self, test_client, sample_author):
        """Test that an update must still carry a name."""
        response = test_client.put(f"/api/authors/{sample_author['id']}", json={"name": ""})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_author_without_books(self, test_client, sample_author):
        """Test deleting an author with no books."""
        response = test_client.delete(f"/api/authors/{sample_author['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Author deleted successfully"}

        response = test_client.get(f"/api/authors/{sample_author['id']}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_author_with_books(self, test_client, sample_author, sample_book):
        """Test that an author with books cannot be deleted."""
        response = test_client.delete(f"/api/authors/{sample_author['id']}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        error = response.json()["error"]
        assert error["type"] == "has_dependents"
        assert "Cannot delete author with books" in error["message"]

        response = test_client.get(f"/api/authors/{sample_author['id']}")
        assert response.status_code == status.HTTP_200_OK

    def test_delete_author_not_found(self, test_client):
        """Test deleting a missing author."""
        response = test_client.delete("/api/authors/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"]["type"] == "not_found"

    def test_author_id_beyond_storage_range(self, test_client):
        """Test that ids too large for a 64-bit integer are rejected, not crashed on."""
        huge = "99999999999999999999"
        responses = [
            test_client.get(f"/api/authors/{huge}"),
            test_client.put(f"/api/authors/{huge}", json={"name": "Nobody"}),
            test_client.delete(f"/api/authors/{huge}"),
        ]
        for response in responses:
            assert response.status_code == status.HTTP_400_BAD_REQUEST
            assert response.json()["error"]["type"] == "validation_error"

    def test_timestamps_carry_utc_offset(self, test_client, sample_author):
        """Test that timestamps are returned as UTC on every backend."""
        data = test_client.get(f"/api/authors/{sample_author['id']}").json()

        for key in ("createdAt", "updatedAt"):
            assert data[key].endswith("Z") or data[key].endswith("+00:00"), data[key]
