import json
from uuid import UUID

from pydantic import BaseModel

from halkit import Link, Resource

ORDERS_JSON = (
    '{"_links":{"self":{"href":"/orders"},"next":{"href":"/orders?page=2"},'
    '"find":{"href":"/orders{?id}","templated":true}},'
    '"_embedded":{"orders":['
    '{"_links":{"self":{"href":"/orders/123"},"basket":{"href":"/baskets/98712"},'
    '"customer":{"href":"/customers/7809"}},"total":30,"currency":"USD","status":"shipped"},'
    '{"_links":{"self":{"href":"/orders/124"},"basket":{"href":"/baskets/97213"},'
    '"customer":{"href":"/customers/12369"}},"total":20,"currency":"USD","status":"processing"}'
    ']},'
    '"currentlyProcessing":14,"shippedToday":20}'
)


def test_orders_json_value(orders):
    assert orders.to_json_value() == json.loads(ORDERS_JSON)


def test_orders_json_text(orders):
    assert orders.to_json() == ORDERS_JSON


def test_key_order_links_embedded_properties(orders):
    value = orders.to_json_value()
    assert list(value) == ["_links", "_embedded", "currentlyProcessing", "shippedToday"]
    assert list(value["_links"]) == ["self", "next", "find"]


def test_empty_containers_are_omitted():
    assert Resource({"a": 1}).to_json_value() == {"a": 1}
    assert Resource({"a": 1}, "/r").to_json_value() == {"_links": {"self": {"href": "/r"}}, "a": 1}


def test_repeated_relation_serializes_as_array():
    res = Resource({}, "/r").link("a", "1").link("a", "2")
    assert res.to_json_value()["_links"]["a"] == [{"href": "1"}, {"href": "2"}]


def test_single_embedded_resource_is_still_an_array():
    res = Resource({}, "/r").embed("items", Resource({"n": 1}, "/r/1"))
    assert res.to_json_value()["_embedded"] == {
        "items": [{"_links": {"self": {"href": "/r/1"}}, "n": 1}],
    }


def test_serialization_is_repeatable(orders):
    first = orders.to_json_value()
    first["_links"]["self"]["href"] = "/changed"
    first["currentlyProcessing"] = 0
    assert orders.to_json_value() == json.loads(ORDERS_JSON)


def test_nested_values_are_converted():
    class Money(BaseModel):
        amount: int
        currency: str

    res = Resource({
        "price": Money(amount=3, currency="EUR"),
        "help": Link("help", "/docs"),
        "tags": ("a", "b"),
    })
    assert res.to_json_value() == {
        "price": {"amount": 3, "currency": "EUR"},
        "help": {"rel": "help", "href": "/docs"},
        "tags": ["a", "b"],
    }


def test_json_text_handles_non_json_types():
    ident = UUID("12345678-1234-5678-1234-567812345678")
    res = Resource({"id": ident})
    assert res.to_json() == '{"id":"12345678-1234-5678-1234-567812345678"}'


def test_json_indent(orders, default_settings):
    assert orders.to_json(indent=2) == json.dumps(json.loads(ORDERS_JSON), indent=2)

    default_settings.JSON_INDENT = 4
    assert orders.to_json() == json.dumps(json.loads(ORDERS_JSON), indent=4)


def test_integral_floats_match_xml_rendering():
    res = Resource({"total": 30.00, "rate": 0.5, "paid": True}, "/o")
    assert res.to_json() == '{"_links":{"self":{"href":"/o"}},"total":30,"rate":0.5,"paid":true}'
    assert "<total>30</total>" in res.to_xml_string()
