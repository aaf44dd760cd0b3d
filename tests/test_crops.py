from conftest import register


def crop_payload(**overrides):
    payload = {
        "name": "Maize",
        "quantity": 100,
        "unit": "kg",
        "price": 30,
        "location": {"latitude": -1.2921, "longitude": 36.8219},
        "description": "Dry white maize",
    }
    payload.update(overrides)
    return payload


def create_crop(client, headers, **overrides):
    r = client.post("/crops", headers=headers, json=crop_payload(**overrides))
    assert r.status_code == 201, r.text
    return r.json()["crop"]


def test_farmer_creates_crop(client, farmer):
    headers, user = farmer
    r = client.post("/crops", headers=headers, json=crop_payload(name="  Beans  "))
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["success"] is True
    crop = body["crop"]
    assert crop["name"] == "Beans"
    assert crop["farmerId"] == user["id"]
    assert crop["status"] == "available"
    assert crop["location"] == {"latitude": -1.2921, "longitude": 36.8219}
    assert crop["id"]
    assert crop["createdAt"]


def test_buyer_cannot_create_crop(client, buyer):
    headers, _ = buyer
    r = client.post("/crops", headers=headers, json=crop_payload())
    assert r.status_code == 403
    assert r.json()["success"] is False


def test_latitude_out_of_range_is_rejected(client, farmer):
    headers, _ = farmer
    r = client.post("/crops", headers=headers, json=crop_payload(location={"latitude": 91, "longitude": 0}))
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert "latitude" in body["message"]


def test_boundary_coordinates_are_accepted(client, farmer):
    headers, _ = farmer
    crop = create_crop(client, headers, location={"latitude": 90, "longitude": 180})
    assert crop["location"] == {"latitude": 90, "longitude": 180}


def test_negative_price_and_missing_fields_are_rejected(client, farmer):
    headers, _ = farmer
    r = client.post("/crops", headers=headers, json=crop_payload(price=-1))
    assert r.status_code == 400

    payload = crop_payload()
    del payload["unit"]
    r = client.post("/crops", headers=headers, json=payload)
    assert r.status_code == 400
    assert "unit" in r.json()["message"]


def test_list_joins_farmer_and_orders_newest_first(client, farmer, buyer):
    headers, user = farmer
    first = create_crop(client, headers, name="Maize")
    second = create_crop(client, headers, name="Sorghum")

    r = client.get("/crops", headers=buyer[0])
    assert r.status_code == 200
    crops = r.json()["crops"]
    assert [c["id"] for c in crops] == [second["id"], first["id"]]
    assert crops[0]["farmerName"] == "Farmer One"
    assert crops[0]["farmerEmail"] == user["email"]
    assert "distance" not in crops[0]


def test_price_filters_are_inclusive(client, farmer, buyer):
    headers, _ = farmer
    cheap = create_crop(client, headers, name="Kale", price=10)
    mid = create_crop(client, headers, name="Maize", price=30)
    dear = create_crop(client, headers, name="Coffee", price=90)

    r = client.get("/crops", headers=buyer[0], params={"minPrice": 10, "maxPrice": 30})
    ids = {c["id"] for c in r.json()["crops"]}
    assert ids == {cheap["id"], mid["id"]}

    r = client.get("/crops", headers=buyer[0], params={"minPrice": 31})
    assert [c["id"] for c in r.json()["crops"]] == [dear["id"]]


def test_negative_price_filter_is_rejected(client, buyer):
    r = client.get("/crops", headers=buyer[0], params={"minPrice": -5})
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_sold_and_reserved_crops_are_never_listed(client, farmer, buyer):
    headers, _ = farmer
    sold = create_crop(client, headers, name="Sold maize", price=20)
    reserved = create_crop(client, headers, name="Reserved maize", price=20)
    open_crop = create_crop(client, headers, name="Open maize", price=20)

    assert client.patch(f"/crops/{sold['id']}/status", headers=headers, json={"status": "sold"}).status_code == 200
    assert client.patch(f"/crops/{reserved['id']}/status", headers=headers, json={"status": "reserved"}).status_code == 200

    for params in ({}, {"minPrice": 0}, {"maxPrice": 20}, {"minPrice": 20, "maxPrice": 20}):
        r = client.get("/crops", headers=buyer[0], params=params)
        assert [c["id"] for c in r.json()["crops"]] == [open_crop["id"]]


def test_owner_updates_status_any_direction(client, farmer):
    headers, _ = farmer
    crop = create_crop(client, headers)

    r = client.patch(f"/crops/{crop['id']}/status", headers=headers, json={"status": "sold"})
    assert r.status_code == 200
    assert r.json() == {"success": True, "crop": {"id": crop["id"], "status": "sold"}}

    # no transition graph: sold -> available is allowed
    r = client.patch(f"/crops/{crop['id']}/status", headers=headers, json={"status": "available"})
    assert r.json()["crop"]["status"] == "available"


def test_non_owner_cannot_update_status(client, farmer):
    headers, _ = farmer
    crop = create_crop(client, headers)
    other_headers, _ = register(client, "farmer.two@agroconnect.io", role="farmer")

    r = client.patch(f"/crops/{crop['id']}/status", headers=other_headers, json={"status": "sold"})
    assert r.status_code == 403
    assert r.json() == {"success": False, "message": "Not authorized to update this crop"}

    r = client.get("/crops", headers=headers)
    assert [c["status"] for c in r.json()["crops"]] == ["available"]


def test_update_status_unknown_crop(client, farmer):
    r = client.patch("/crops/9999/status", headers=farmer[0], json={"status": "sold"})
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Crop not found"}


def test_update_status_rejects_unknown_value(client, farmer):
    headers, _ = farmer
    crop = create_crop(client, headers)
    r = client.patch(f"/crops/{crop['id']}/status", headers=headers, json={"status": "eaten"})
    assert r.status_code == 400


def test_distance_sort_when_reference_point_given(client, farmer, buyer):
    headers, _ = farmer
    london = create_crop(client, headers, name="London", location={"latitude": 51.5074, "longitude": -0.1278})
    nairobi = create_crop(client, headers, name="Nairobi", location={"latitude": -1.2921, "longitude": 36.8219})
    nakuru = create_crop(client, headers, name="Nakuru", location={"latitude": -0.3031, "longitude": 36.08})

    r = client.get("/crops", headers=buyer[0], params={"latitude": -1.28, "longitude": 36.82})
    assert r.status_code == 200
    crops = r.json()["crops"]
    assert [c["id"] for c in crops] == [nairobi["id"], nakuru["id"], london["id"]]
    distances = [c["distance"] for c in crops]
    assert distances == sorted(distances)
    assert distances[0] < 2


def test_distance_sort_needs_both_coordinates(client, buyer):
    r = client.get("/crops", headers=buyer[0], params={"latitude": 10})
    assert r.status_code == 400
    assert r.json()["message"] == "latitude and longitude must be given together"


def test_fractional_values_are_kept_exactly(client, farmer, buyer):
    headers, _ = farmer
    crop = create_crop(client, headers, price=10.004, quantity=0.125)
    assert crop["price"] == 10.004
    assert crop["quantity"] == 0.125

    listed = client.get("/crops", headers=buyer[0]).json()["crops"]
    assert [(c["price"], c["quantity"]) for c in listed] == [(10.004, 0.125)]

    # a filter equal to the shown price includes the listing
    r = client.get("/crops", headers=buyer[0], params={"maxPrice": crop["price"]})
    assert [c["id"] for c in r.json()["crops"]] == [crop["id"]]
    r = client.get("/crops", headers=buyer[0], params={"maxPrice": 10.0})
    assert r.json()["crops"] == []


def test_non_finite_numbers_are_rejected(client, farmer):
    headers, _ = farmer
    for field in ("price", "quantity"):
        body = '{"name": "Maize", "quantity": 1, "unit": "kg", "price": 1, "location": {"latitude": 0, "longitude": 0}}'
        body = body.replace(f'"{field}": 1', f'"{field}": 1e400')
        r = client.post("/crops", headers={**headers, "Content-Type": "application/json"}, content=body)
        assert r.status_code == 400, r.text
        assert r.json()["success"] is False
        assert field in r.json()["message"]

    assert client.get("/crops", headers=headers).json()["crops"] == []


def test_created_and_listed_crop_have_the_same_shape(client, farmer):
    headers, _ = farmer
    created = create_crop(client, headers, description=None)
    listed = client.get("/crops", headers=headers).json()["crops"][0]

    assert "distance" not in created
    assert "description" not in created
    assert set(created) == set(listed)


def test_timestamps_are_utc_with_z_suffix(client, farmer):
    headers, _ = farmer
    crop = create_crop(client, headers)
    assert crop["createdAt"].endswith("Z")
    assert client.get("/crops", headers=headers).json()["crops"][0]["createdAt"].endswith("Z")
