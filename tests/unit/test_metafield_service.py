"""
Tests for MetafieldService — RRP metafield lookup with absorbed failures.
"""

from services.metafield_service import MetafieldService
from tests.factories import MetafieldFactory


def lookup(owner_id, owner="variant"):
    return lambda client: MetafieldService(client, owner=owner).fetch_rrp_metafield(owner_id)


class TestFetchRrpMetafield:
    """Tests for MetafieldService.fetch_rrp_metafield()"""

    def test_returns_rrp_metafield(self, call_shopify, shopify_stub):
        shopify_stub.set_metafields(111, [
            MetafieldFactory.create(namespace="custom", key="care", id=1),
            MetafieldFactory.rrp([{"currency_code": "USD", "value": 60}], id=2),
        ])

        metafield = call_shopify(lookup(111))

        assert metafield is not None
        assert metafield.id == 2
        assert metafield.namespace == "sparklayer"
        assert metafield.key == "rrp"

    def test_requests_variant_endpoint(self, call_shopify, shopify_stub):
        call_shopify(lookup(111))

        assert shopify_stub.paths() == ["/variants/111/metafields.json"]

    def test_legacy_product_endpoint(self, call_shopify, shopify_stub):
        shopify_stub.set_metafields(
            222,
            [MetafieldFactory.rrp([{"currency_code": "USD", "value": 60}])],
            owner="product"
        )

        metafield = call_shopify(lookup(222, owner="product"))

        assert shopify_stub.paths() == ["/products/222/metafields.json"]
        assert metafield is not None

    def test_namespace_and_key_must_both_match(self, call_shopify, shopify_stub):
        shopify_stub.set_metafields(111, [
            MetafieldFactory.create(namespace="sparklayer", key="price"),
            MetafieldFactory.create(namespace="custom", key="rrp"),
        ])

        assert call_shopify(lookup(111)) is None

    def test_no_metafields_is_none(self, call_shopify, shopify_stub):
        assert call_shopify(lookup(111)) is None

    def test_http_error_is_absorbed(self, call_shopify, shopify_stub):
        shopify_stub.set_metafields_response(111, 404, '{"errors":"Not Found"}')

        assert call_shopify(lookup(111)) is None

    def test_network_failure_is_absorbed(self, call_shopify, shopify_stub):
        shopify_stub.make_unreachable("/variants/111/metafields.json")

        assert call_shopify(lookup(111)) is None

    def test_malformed_body_is_absorbed(self, call_shopify, shopify_stub):
        shopify_stub.set_metafields_response(111, 200, {"unexpected": True})

        assert call_shopify(lookup(111)) is None

    def test_missing_owner_skips_request(self, call_shopify, shopify_stub):
        assert call_shopify(lookup(None)) is None
        assert shopify_stub.requests == []
