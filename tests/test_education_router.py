import rayzum.routers.education as education_mod


def test_education_crud_and_default(client):
    resp = client.post("/education-items", json={"school": "MIT", "degree": "BS", "year": "2010"})
    assert resp.status_code == 201
    item = resp.json()

    resp = client.put(f"/education-items/{item['id']}", json={"year": "2011"})
    assert resp.status_code == 200
    assert resp.json()["year"] == "2011"

    resp = client.put(f"/education-items/{item['id']}/default")
    assert resp.status_code == 200
    assert client.get("/education-items/default").json()["id"] == item["id"]
    assert client.get("/education-items").json()[0]["is_default"] is True

    assert client.delete(f"/education-items/{item['id']}").status_code == 200
    assert client.get("/education-items/default").status_code == 404


def test_education_validation_and_conflict(client):
    assert client.post("/education-items", json={"school": "MIT", "degree": "", "year": "2010"}).status_code == 422
    client.post("/education-items", json={"school": "MIT", "degree": "BS", "year": "2010"})
    resp = client.post("/education-items", json={"school": "MIT", "degree": "BS", "year": "2010"})
    assert resp.status_code == 409
    assert resp.json()["detail"] == "This education entry already exists"


def test_education_missing_item(client):
    assert client.get("/education-items/3").status_code == 404
    assert client.put("/education-items/3", json={"year": "2000"}).status_code == 404
    assert client.put("/education-items/3/default").status_code == 404
    assert client.delete("/education-items/3").status_code == 404


def test_delete_returns_500_on_unexpected_failure(monkeypatch, client):
    monkeypatch.setattr(
        education_mod,
        "delete_education_item",
        lambda store, owner_id, item_id: (_ for _ in ()).throw(RuntimeError("db")),
    )
    assert client.delete("/education-items/1").status_code == 500
