from halkit import Link, Resource


def build_orders() -> Resource:

    # collection with paging and search links
    orders = Resource({
        "currentlyProcessing": 14,
        "shippedToday": 20,
    }, "/orders")
    orders.link("next", "/orders?page=2")
    orders.link("find", {"href": "/orders{?id}", "templated": True})

    # prebuilt links
    order_123 = Resource({
        "total": 30.00,
        "currency": "USD",
        "status": "shipped",
    }, "/orders/123")
    order_123.link(Link("basket", "/baskets/98712"))
    order_123.link(Link("customer", {"href": "/customers/7809"}))

    # inline links
    order_124 = Resource({
        "total": 20.00,
        "currency": "USD",
        "status": "processing",
    }, "/orders/124")
    order_124.link("basket", "/baskets/97213")
    order_124.link("customer", "/customers/12369")

    orders.embed("orders", [order_123, order_124])
    return orders


def main():
    orders = build_orders()

    print("JSON:", orders.to_json(indent=2))
    print("XML:", orders.to_xml_string("  ", pretty=True))


if __name__ == "__main__":
    main()
