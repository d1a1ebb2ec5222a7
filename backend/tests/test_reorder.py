"""
Reorder of banners, gallery images and categories
"""
from fastapi.testclient import TestClient
from sqlalchemy.orm import Query

from catalog_admin.main import app
from catalog_admin.models import Banner, ProductGallery, ProductCategory

TOO_BIG = 2**70


def _orders(db, model, ids):
    db.expire_all()
    return {row.id: row.order for row in db.query(model).filter(model.id.in_(ids)).all()}


class TestBannerReorder:

    def test_writes_given_orders(self, api, test_db, make_supplier, make_banner):
        supplier = make_supplier()
        b1, b2, b3 = (make_banner(supplier, order) for order in (1, 2, 3))

        response = api.post("/api/v1/banners/reorder", json={
            "supplier_id": supplier.id,
            "banners": [
                {"id": b3.id, "order": 1},
                {"id": b1.id, "order": 2},
                {"id": b2.id, "order": 3},
            ]
        })

        assert response.status_code == 200
        assert response.json()["updated"] == 3
        assert _orders(test_db, Banner, [b1.id, b2.id, b3.id]) == {b3.id: 1, b1.id: 2, b2.id: 3}

    def test_skips_banners_of_other_suppliers(self, api, test_db, make_supplier, make_banner):
        supplier = make_supplier("First")
        other = make_supplier("Second")
        own = make_banner(supplier, 1)
        foreign = make_banner(other, 1)

        response = api.post("/api/v1/banners/reorder", json={
            "supplier_id": supplier.id,
            "banners": [{"id": own.id, "order": 2}, {"id": foreign.id, "order": 5}]
        })

        assert response.status_code == 200
        assert response.json()["updated"] == 1
        assert _orders(test_db, Banner, [own.id, foreign.id]) == {own.id: 2, foreign.id: 1}

    def test_unknown_banner_is_reported_by_index(self, api, make_supplier, make_banner):
        supplier = make_supplier()
        banner = make_banner(supplier, 1)

        response = api.post("/api/v1/banners/reorder", json={
            "supplier_id": supplier.id,
            "banners": [{"id": banner.id, "order": 1}, {"id": 999, "order": 2}]
        })

        assert response.status_code == 422
        assert list(response.json()["errors"]) == ["banners.1.id"]

    def test_unknown_supplier_is_rejected(self, api, make_supplier, make_banner):
        banner = make_banner(make_supplier(), 1)

        response = api.post("/api/v1/banners/reorder", json={
            "supplier_id": 999,
            "banners": [{"id": banner.id, "order": 1}]
        })

        assert response.status_code == 422
        assert "supplier_id" in response.json()["errors"]

    def test_order_must_be_positive(self, api, make_supplier, make_banner):
        supplier = make_supplier()
        banner = make_banner(supplier, 1)

        response = api.post("/api/v1/banners/reorder", json={
            "supplier_id": supplier.id,
            "banners": [{"id": banner.id, "order": 0}]
        })

        assert response.status_code == 422
        assert "banners.0.order" in response.json()["errors"]

    def test_empty_list_is_rejected(self, api, make_supplier):
        supplier = make_supplier()

        response = api.post("/api/v1/banners/reorder", json={"supplier_id": supplier.id, "banners": []})

        assert response.status_code == 422
        assert "banners" in response.json()["errors"]

    def test_web_reorder_redirects_back(self, web, test_db, make_supplier, make_banner):
        supplier = make_supplier()
        b1, b2 = make_banner(supplier, 1), make_banner(supplier, 2)

        response = web.post(
            "/banners/reorder",
            json={"supplier_id": supplier.id, "banners": [{"id": b1.id, "order": 2}, {"id": b2.id, "order": 1}]},
            headers={"referer": "/banners"},
            follow_redirects=False
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/banners"
        assert _orders(test_db, Banner, [b1.id, b2.id]) == {b1.id: 2, b2.id: 1}

    def test_ids_beyond_the_integer_range_are_field_errors(self, api, make_supplier, make_banner):
        supplier = make_supplier()
        banner = make_banner(supplier, 1)

        response = api.post("/api/v1/banners/reorder", json={
            "supplier_id": supplier.id,
            "banners": [{"id": banner.id, "order": 1}, {"id": TOO_BIG, "order": 2}]
        })
        other = api.post("/api/v1/banners/reorder", json={
            "supplier_id": TOO_BIG,
            "banners": [{"id": banner.id, "order": TOO_BIG}]
        })

        assert response.status_code == 422
        assert list(response.json()["errors"]) == ["banners.1.id"]
        assert other.status_code == 422
        assert set(other.json()["errors"]) == {"supplier_id", "banners.0.order"}

    def test_failure_partway_leaves_every_order_unchanged(
        self, client, auth_headers, test_db, make_supplier, make_banner, monkeypatch
    ):
        supplier = make_supplier()
        b1, b2 = make_banner(supplier, 1), make_banner(supplier, 2)
        real_update = Query.update
        calls = []

        def update_then_fail(query, *args, **kwargs):
            calls.append(query)
            if len(calls) == 2:
                raise RuntimeError("connection lost")
            return real_update(query, *args, **kwargs)

        monkeypatch.setattr(Query, "update", update_then_fail)
        response = TestClient(app, raise_server_exceptions=False).post(
            "/api/v1/banners/reorder",
            json={"supplier_id": supplier.id, "banners": [{"id": b1.id, "order": 2}, {"id": b2.id, "order": 1}]},
            headers=auth_headers
        )
        monkeypatch.undo()

        assert response.status_code == 500
        assert response.json() == {"message": "Internal Server Error"}
        assert len(calls) == 2
        assert _orders(test_db, Banner, [b1.id, b2.id]) == {b1.id: 1, b2.id: 2}


class TestGalleryReorder:

    def test_gallery_order_is_returned_sorted(self, api, make_supplier, make_product, make_gallery):
        product = make_product(make_supplier())
        first = make_gallery(product, 1)
        second = make_gallery(product, 2)

        response = api.post(f"/api/v1/products/{product.id}/galleries/reorder", json={
            "galleries": [{"id": first.id, "order": 2}, {"id": second.id, "order": 1}]
        })
        assert response.status_code == 200

        galleries = api.get(f"/api/v1/products/{product.id}").json()["galleries"]
        assert [g["id"] for g in galleries] == [second.id, first.id]
        assert [g["order"] for g in galleries] == [1, 2]

    def test_images_of_other_products_are_skipped(self, api, test_db, make_supplier, make_product, make_gallery):
        supplier = make_supplier()
        product = make_product(supplier, "One")
        other = make_product(supplier, "Two")
        own = make_gallery(product, 1)
        foreign = make_gallery(other, 1)

        response = api.post(f"/api/v1/products/{product.id}/galleries/reorder", json={
            "galleries": [{"id": own.id, "order": 3}, {"id": foreign.id, "order": 3}]
        })

        assert response.json()["updated"] == 1
        assert _orders(test_db, ProductGallery, [own.id, foreign.id]) == {own.id: 3, foreign.id: 1}

    def test_unknown_product_is_not_found(self, api, make_supplier, make_product, make_gallery):
        gallery = make_gallery(make_product(make_supplier()), 1)

        response = api.post("/api/v1/products/999/galleries/reorder", json={
            "galleries": [{"id": gallery.id, "order": 1}]
        })

        assert response.status_code == 404

    def test_unknown_image_is_reported(self, api, make_supplier, make_product):
        product = make_product(make_supplier())

        response = api.post(f"/api/v1/products/{product.id}/galleries/reorder", json={
            "galleries": [{"id": 12345, "order": 1}]
        })

        assert response.status_code == 422
        assert response.json()["errors"] == {"galleries.0.id": ["The selected galleries.0.id is invalid."]}

    def test_web_validation_error_goes_back_with_errors(self, web, make_supplier, make_product):
        product = make_product(make_supplier())

        response = web.post(
            f"/products/{product.id}/galleries/reorder",
            json={"galleries": [{"id": 12345, "order": 1}]},
            headers={"referer": f"/products/{product.id}"},
            follow_redirects=False
        )
        assert response.status_code == 303
        assert response.headers["location"] == f"/products/{product.id}"

        page = web.get(f"/products/{product.id}", headers={"X-Inertia": "true"}).json()
        assert "galleries.0.id" in page["props"]["errors"]


class TestCategoryReorder:

    def test_accepts_zero_and_has_no_scope(self, api, test_db, make_supplier, make_category):
        first = make_category(make_supplier("First"), "Speakers", order=0)
        second = make_category(make_supplier("Second"), "Tents", order=1)

        response = api.post("/api/v1/product-categories/reorder", json={
            "categories": [{"id": first.id, "order": 1}, {"id": second.id, "order": 0}]
        })

        assert response.status_code == 200
        assert response.json()["updated"] == 2
        assert _orders(test_db, ProductCategory, [first.id, second.id]) == {first.id: 1, second.id: 0}

    def test_listing_follows_order(self, api, make_supplier, make_category):
        supplier = make_supplier()
        late = make_category(supplier, "Late", order=5)
        early = make_category(supplier, "Early", order=1)

        items = api.get("/api/v1/product-categories/").json()["items"]

        assert [item["id"] for item in items] == [early.id, late.id]

    def test_negative_order_is_rejected(self, api, make_supplier, make_category):
        category = make_category(make_supplier())

        response = api.post("/api/v1/product-categories/reorder", json={
            "categories": [{"id": category.id, "order": -1}]
        })

        assert response.status_code == 422
        assert "categories.0.order" in response.json()["errors"]
