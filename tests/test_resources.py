from urllib.parse import parse_qs, urlsplit

import pytest

from dairyclient.api.endpoints import ENDPOINTS
from dairyclient.api.errors import APIError, DeleteFailedError
from dairyclient.data.models.discounts import (
    Discount,
    DiscountCreationInput,
    DiscountList,
    DiscountUpdateInput,
)
from dairyclient.data.models.options import (
    ProductOption,
    ProductOptionCreationInput,
    ProductOptionList,
    ProductOptionUpdateInput,
    ProductOptionValue,
    ProductOptionValueCreationInput,
    ProductOptionValueUpdateInput,
)
from dairyclient.data.models.products import (
    Product,
    ProductCreationInput,
    ProductList,
    ProductRoot,
    ProductRootList,
    ProductUpdateInput,
)
from dairyclient.data.models.users import User, UserCreationInput, UserUpdateInput
from tests.utils import STORE_URL

V1 = f"{STORE_URL}/v1"


def _list_body(*items):
    return {"count": len(items), "limit": 25, "page": 1, "data": list(items)}


def test_every_endpoint_renders_under_v1(client):
    sample_args = {"sku": "sku", "root_id": 1, "product_id": 2, "option_id": 3, "value_id": 4, "discount_id": 5, "user_id": 6}

    for name, endpoint in ENDPOINTS.items():
        url = client.build_url(None, *endpoint.render(sample_args))
        assert url.startswith(f"{V1}/"), name
        assert "{" not in url, name


def test_call_requires_path_arguments(client):
    with pytest.raises(TypeError):
        client.call("get_product")


def test_call_rejects_wrong_input_type(client, req_mock):
    with pytest.raises(TypeError):
        client.call("create_product", body=ProductUpdateInput(name="nope"))
    with pytest.raises(TypeError):
        client.call("create_discount", body=None)
    assert not req_mock.called


class TestProducts:
    def test_exists(self, client, req_mock):
        req_mock.head(f"{V1}/product/skateboard", status_code=200)
        req_mock.head(f"{V1}/product/unicycle", status_code=404)

        assert client.products.exists("skateboard") is True
        assert client.products.exists("unicycle") is False

    def test_get(self, client, req_mock):
        req_mock.get(f"{V1}/product/skateboard", json={"id": 1, "sku": "skateboard", "price": 12.34})

        product = client.products.get("skateboard")

        assert isinstance(product, Product)
        assert product.row.id == 1
        assert product.price == 12.34

    def test_get_missing_product_raises_api_error(self, client, req_mock):
        req_mock.get(f"{V1}/product/nope", status_code=404, json={"status": 404, "message": "product not found"})

        with pytest.raises(APIError) as excinfo:
            client.products.get("nope")

        assert excinfo.value.status == 404

    def test_list_passes_filters_and_returns_envelope(self, client, req_mock):
        req_mock.get(f"{V1}/products", json=_list_body({"id": 1, "sku": "a"}, {"id": 2, "sku": "b"}))

        page = client.products.list({"page": "1", "limit": "25"})

        assert isinstance(page, ProductList)
        assert page.count == 2
        assert [p.sku for p in page.data] == ["a", "b"]
        assert parse_qs(urlsplit(req_mock.last_request.url).query) == {"page": ["1"], "limit": ["25"]}

    def test_create(self, client, req_mock):
        req_mock.post(f"{V1}/product", json={"id": 9, "sku": "new-thing", "name": "New Thing"})

        product = client.products.create(ProductCreationInput(name="New Thing", sku="new-thing"))

        assert product.row.id == 9
        assert req_mock.last_request.json()["sku"] == "new-thing"
        assert req_mock.last_request.json()["options"] == []

    def test_update(self, client, req_mock):
        req_mock.patch(f"{V1}/product/skateboard", json={"id": 1, "sku": "skateboard", "quantity": 3})

        product = client.products.update("skateboard", ProductUpdateInput(sku="skateboard", quantity=3))

        assert product.quantity == 3
        assert req_mock.last_request.method == "PATCH"
        assert "options" not in req_mock.last_request.json()

    def test_delete(self, client, req_mock):
        req_mock.delete(f"{V1}/product/skateboard", status_code=200)

        assert client.products.delete("skateboard") is None

    def test_delete_failure(self, client, req_mock):
        req_mock.delete(f"{V1}/product/skateboard", status_code=404)

        with pytest.raises(DeleteFailedError):
            client.products.delete("skateboard")

    def test_timeout_is_passed_through(self, client, req_mock):
        req_mock.get(f"{V1}/product/skateboard", json={"id": 1})

        client.products.get("skateboard", timeout=1.5)

        assert req_mock.last_request.timeout == 1.5


class TestProductRoots:
    def test_get(self, client, req_mock):
        req_mock.get(f"{V1}/product_root/2", json={"id": 2, "name": "Skateboard", "products": [{"id": 1, "sku": "a"}]})

        root = client.product_roots.get(2)

        assert isinstance(root, ProductRoot)
        assert root.products[0].sku == "a"

    def test_list(self, client, req_mock):
        req_mock.get(f"{V1}/product_roots", json=_list_body({"id": 2, "name": "Skateboard"}))

        page = client.product_roots.list()

        assert isinstance(page, ProductRootList)
        assert page.data[0].name == "Skateboard"

    def test_delete(self, client, req_mock):
        req_mock.delete(f"{V1}/product_root/2", status_code=200)

        client.product_roots.delete(2)

        assert req_mock.call_count == 1


class TestProductOptions:
    def test_list(self, client, req_mock):
        req_mock.get(f"{V1}/product/1/options", json=_list_body({"id": 3, "name": "color", "values": []}))

        page = client.product_options.list(1, {"limit": "5"})

        assert isinstance(page, ProductOptionList)
        assert page.data[0].name == "color"
        assert urlsplit(req_mock.last_request.url).query == "limit=5"

    def test_create(self, client, req_mock):
        req_mock.post(
            f"{V1}/product/1/options",
            json={"id": 3, "name": "color", "values": [{"id": 10, "value": "red"}, {"id": 11, "value": "blue"}]},
        )

        option = client.product_options.create(1, ProductOptionCreationInput(name="color", values=["red", "blue"]))

        assert isinstance(option, ProductOption)
        assert [v.value for v in option.values] == ["red", "blue"]
        assert req_mock.last_request.json() == {"name": "color", "values": ["red", "blue"]}

    def test_update(self, client, req_mock):
        req_mock.patch(f"{V1}/product_options/3", json={"id": 3, "name": "colour"})

        option = client.product_options.update(3, ProductOptionUpdateInput(name="colour"))

        assert option.name == "colour"

    def test_delete(self, client, req_mock):
        req_mock.delete(f"{V1}/product_options/3", status_code=200)

        client.product_options.delete(3)

        assert req_mock.last_request.method == "DELETE"

    def test_create_value(self, client, req_mock):
        req_mock.post(f"{V1}/product_options/3/value", json={"id": 12, "product_option_id": 3, "value": "green"})

        value = client.product_options.create_value(3, ProductOptionValueCreationInput(value="green"))

        assert isinstance(value, ProductOptionValue)
        assert value.product_option_id == 3
        assert req_mock.last_request.json() == {"value": "green"}

    def test_update_value(self, client, req_mock):
        req_mock.patch(f"{V1}/product_option_values/12", json={"id": 12, "value": "lime"})

        value = client.product_options.update_value(12, ProductOptionValueUpdateInput(value="lime"))

        assert value.value == "lime"

    def test_delete_value_failure(self, client, req_mock):
        req_mock.delete(f"{V1}/product_option_values/12", status_code=500)

        with pytest.raises(DeleteFailedError) as excinfo:
            client.product_options.delete_value(12)

        assert excinfo.value.status_code == 500


class TestDiscounts:
    def test_get(self, client, req_mock):
        req_mock.get(f"{V1}/discount/4", json={"id": 4, "name": "10 off", "amount": 10})

        discount = client.discounts.get(4)

        assert isinstance(discount, Discount)
        assert discount.amount == 10

    def test_list(self, client, req_mock):
        req_mock.get(f"{V1}/discounts", json=_list_body({"id": 4, "name": "10 off"}))

        page = client.discounts.list()

        assert isinstance(page, DiscountList)
        assert page.data[0].row.id == 4

    def test_create(self, client, req_mock):
        req_mock.post(f"{V1}/discount", json={"id": 5, "name": "Half off", "code": "HALF"})

        discount = client.discounts.create(DiscountCreationInput(name="Half off", requires_code=True, code="HALF"))

        assert discount.code == "HALF"
        assert req_mock.last_request.json()["requires_code"] is True

    def test_update(self, client, req_mock):
        req_mock.patch(f"{V1}/discount/5", json={"id": 5, "name": "Most off"})

        discount = client.discounts.update(5, DiscountUpdateInput(name="Most off"))

        assert discount.name == "Most off"

    def test_delete(self, client, req_mock):
        req_mock.delete(f"{V1}/discount/5", status_code=200)

        client.discounts.delete(5)

        assert req_mock.call_count == 1


class TestUsers:
    def test_create(self, client, req_mock):
        req_mock.post(f"{V1}/user", json={"id": 7, "first_name": "Frances", "email": "frances@farm.com"})

        user = client.users.create(UserCreationInput(first_name="Frances", username="frances", password="hunter2"))

        assert isinstance(user, User)
        assert user.row.id == 7
        assert req_mock.last_request.json()["username"] == "frances"

    def test_create_rejected_by_api(self, client, req_mock):
        req_mock.post(f"{V1}/user", status_code=400, json={"status": 400, "message": "username already taken"})

        with pytest.raises(APIError) as excinfo:
            client.users.create(UserCreationInput(username="frances"))

        assert excinfo.value.message == "username already taken"

    def test_update(self, client, req_mock):
        req_mock.patch(f"{V1}/user/7", json={"id": 7, "email": "new@farm.com"})

        user = client.users.update(7, UserUpdateInput(email="new@farm.com", current_password="hunter2"))

        assert user.email == "new@farm.com"

    def test_delete(self, client, req_mock):
        req_mock.delete(f"{V1}/user/7", status_code=200)

        client.users.delete(7)

        assert req_mock.last_request.url == f"{V1}/user/7"

    def test_delete_failure(self, client, req_mock):
        req_mock.delete(f"{V1}/user/7", status_code=403)

        with pytest.raises(DeleteFailedError) as excinfo:
            client.users.delete(7)

        assert excinfo.value.status_code == 403
