"""
Product gallery uploads, uniqueness of order per product and file cleanup
"""
from conftest import image_file


def _create(api, product_id, order, file=None):
    return api.post(
        "/api/v1/product-galleries/",
        data={"product_id": str(product_id), "order": str(order)},
        files={"file": file or image_file()}
    )


class TestGalleryCreate:

    def test_stores_the_file(self, api, storage, make_supplier, make_product):
        product = make_product(make_supplier())

        response = _create(api, product.id, 1)

        assert response.status_code == 201
        data = response.json()
        assert data["file_path"].startswith("product-galleries/")
        assert data["file_path"].endswith(".png")
        assert data["file_url"] == f"/storage/{data['file_path']}"
        assert data["product"]["id"] == product.id
        assert storage.exists(data["file_path"])

    def test_file_is_required(self, api, make_supplier, make_product):
        product = make_product(make_supplier())

        response = api.post(
            "/api/v1/product-galleries/",
            data={"product_id": str(product.id), "order": "1"}
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"file": ["The file field is required."]}

    def test_rejects_non_images(self, api, make_supplier, make_product):
        product = make_product(make_supplier())

        response = _create(api, product.id, 1, file=("notes.txt", b"hello", "text/plain"))

        assert response.status_code == 422
        assert "file" in response.json()["errors"]

    def test_rejects_a_script_named_like_a_png(self, api, storage, make_supplier, make_product):
        product = make_product(make_supplier())
        script = ("evil.png", b"#!/bin/sh\necho not an image\n", "image/png")

        response = _create(api, product.id, 1, file=script)

        assert response.status_code == 422
        assert response.json()["errors"] == {"file": ["The file must be an image."]}
        assert not any(storage.root.rglob("*.png"))

    def test_order_is_unique_per_product(self, api, make_supplier, make_product, make_gallery):
        supplier = make_supplier()
        product = make_product(supplier, "One")
        other = make_product(supplier, "Two")
        make_gallery(product, 1)

        taken = _create(api, product.id, 1)
        free_elsewhere = _create(api, other.id, 1)

        assert taken.status_code == 422
        assert list(taken.json()["errors"]) == ["order"]
        assert free_elsewhere.status_code == 201

    def test_order_must_be_at_least_one(self, api, make_supplier, make_product):
        product = make_product(make_supplier())

        response = _create(api, product.id, 0)

        assert response.status_code == 422
        assert "order" in response.json()["errors"]

    def test_unknown_product(self, api):
        response = _create(api, 999, 1)

        assert response.status_code == 422
        assert response.json()["errors"] == {"product_id": ["The selected product id is invalid."]}


class TestGalleryUpdate:

    def test_new_file_replaces_the_old_one(self, api, storage, make_supplier, make_product):
        product = make_product(make_supplier())
        created = _create(api, product.id, 1).json()

        response = api.put(
            f"/api/v1/product-galleries/{created['id']}",
            data={"product_id": str(product.id), "order": "1"},
            files={"file": image_file("new.jpg", content_type="image/jpeg")}
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["file_path"] != created["file_path"]
        assert updated["file_path"].endswith(".jpg")
        assert storage.exists(updated["file_path"])
        assert not storage.exists(created["file_path"])

    def test_keeping_its_own_order_is_allowed(self, api, make_supplier, make_product, make_gallery):
        product = make_product(make_supplier())
        gallery = make_gallery(product, 2)

        response = api.put(
            f"/api/v1/product-galleries/{gallery.id}",
            data={"product_id": str(product.id), "order": "2"}
        )

        assert response.status_code == 200
        assert response.json()["file_path"] == gallery.file_path

    def test_order_of_a_sibling_is_rejected(self, api, make_supplier, make_product, make_gallery):
        product = make_product(make_supplier())
        make_gallery(product, 1)
        gallery = make_gallery(product, 2)

        response = api.put(
            f"/api/v1/product-galleries/{gallery.id}",
            data={"product_id": str(product.id), "order": "1"}
        )

        assert response.status_code == 422
        assert "order" in response.json()["errors"]

    def test_product_is_required(self, api, make_supplier, make_product, make_gallery):
        gallery = make_gallery(make_product(make_supplier()), 1)

        response = api.put(f"/api/v1/product-galleries/{gallery.id}", data={"order": "3"})

        assert response.status_code == 422
        assert response.json()["errors"] == {"product_id": ["The product id field is required."]}


class TestGalleryDelete:

    def test_removes_row_and_file(self, api, storage, make_supplier, make_product):
        product = make_product(make_supplier())
        created = _create(api, product.id, 1).json()

        response = api.delete(f"/api/v1/product-galleries/{created['id']}")

        assert response.status_code == 204
        assert not storage.exists(created["file_path"])
        assert api.get(f"/api/v1/product-galleries/{created['id']}").status_code == 404


class TestGalleryList:

    def test_filtered_by_product_and_sorted_by_order(self, api, make_supplier, make_product, make_gallery):
        supplier = make_supplier()
        product = make_product(supplier, "One")
        other = make_product(supplier, "Two")
        third = make_gallery(product, 3)
        first = make_gallery(product, 1)
        make_gallery(other, 2)

        data = api.get("/api/v1/product-galleries/", params={"product_id": product.id}).json()

        assert data["total"] == 2
        assert [item["id"] for item in data["items"]] == [first.id, third.id]
