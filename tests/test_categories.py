from app.models.task import Task


# ========== TEST CREATE CATEGORY ==========
def test_create_category_success(client):
    response = client.post("/api/categories", json={"name": "Work", "color": "#0000ff"})
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Work"
    assert data["color"] == "#0000ff"
    assert "id" in data

def test_create_category_default_color(client):
    response = client.post("/api/categories", json={"name": "Perso"})
    assert response.status_code == 201
    assert response.json()["color"] == "#1890ff"

def test_create_category_duplicate(client):
    client.post("/api/categories", json={"name": "Work"})
    response = client.post("/api/categories", json={"name": "Work", "color": "#ff0000"})
    assert response.status_code == 409
    assert "exists" in response.json()["detail"].lower()

def test_create_category_name_is_case_sensitive(client):
    """'work' et 'Work' sont deux noms différents"""
    client.post("/api/categories", json={"name": "Work"})
    response = client.post("/api/categories", json={"name": "work"})
    assert response.status_code == 201

def test_create_category_validation(client):
    assert client.post("/api/categories", json={}).status_code == 422
    assert client.post("/api/categories", json={"name": "  "}).status_code == 422
    assert client.post("/api/categories", json={"name": "x" * 51}).status_code == 422
    assert client.post("/api/categories", json={"name": "Ok", "color": "blue"}).status_code == 422
    assert client.post("/api/categories", json={"name": "x" * 50}).status_code == 201

# ========== TEST LIST / GET ==========
def test_list_categories_sorted_by_name(client):
    for name in ["Zeta", "Alpha", "Maison"]:
        client.post("/api/categories", json={"name": name})

    response = client.get("/api/categories")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Alpha", "Maison", "Zeta"]

def test_get_category_with_tasks(client, work_category):
    client.post("/api/tasks", json={"title": "Rapport", "category_id": work_category["id"]})
    client.post("/api/tasks", json={"title": "Hors catégorie"})

    response = client.get(f"/api/categories/{work_category['id']}")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Work"
    assert len(data["tasks"]) == 1
    assert data["tasks"][0]["title"] == "Rapport"
    assert data["tasks"][0]["completed"] == False

def test_get_category_not_found(client):
    response = client.get("/api/categories/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Category not found"

# ========== TEST UPDATE ==========
def test_update_category(client, work_category):
    response = client.put(
        f"/api/categories/{work_category['id']}",
        json={"name": "Bureau", "color": "#00ff00"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Bureau"
    assert data["color"] == "#00ff00"

def test_update_category_partial(client, work_category):
    data = client.put(f"/api/categories/{work_category['id']}", json={"color": "#abc"}).json()
    assert data["name"] == "Work"
    assert data["color"] == "#abc"

def test_update_category_same_name(client, work_category):
    """Garder son propre nom n'est pas un doublon"""
    response = client.put(f"/api/categories/{work_category['id']}", json={"name": "Work"})
    assert response.status_code == 200

def test_update_category_duplicate_name(client, work_category):
    other = client.post("/api/categories", json={"name": "Maison"}).json()
    response = client.put(f"/api/categories/{other['id']}", json={"name": "Work"})
    assert response.status_code == 409

    # rien n'a changé
    assert client.get(f"/api/categories/{other['id']}").json()["name"] == "Maison"

def test_update_category_not_found(client):
    assert client.put("/api/categories/999", json={"name": "X"}).status_code == 404

# ========== TEST DELETE ==========
def test_delete_category_detaches_tasks(client, work_category):
    """Scénario: 3 tâches gardées, category à null"""
    ids = [
        client.post("/api/tasks", json={"title": f"Tâche {i}", "category_id": work_category["id"]}).json()["id"]
        for i in range(3)
    ]

    response = client.delete(f"/api/categories/{work_category['id']}")
    assert response.status_code == 204

    items = client.get("/api/tasks").json()["items"]
    assert sorted(t["id"] for t in items) == sorted(ids)
    assert all(t["category"] is None for t in items)
    assert all(t["category_id"] is None for t in items)

    assert client.get(f"/api/categories/{work_category['id']}").status_code == 404
    assert client.get("/api/categories").json() == []

def test_delete_category_in_db(client, db, work_category):
    """Vérifie directement en base que les tâches existent toujours"""
    client.post("/api/tasks", json={"title": "Reste", "category_id": work_category["id"]})
    client.delete(f"/api/categories/{work_category['id']}")

    tasks = db.query(Task).all()
    assert len(tasks) == 1
    assert tasks[0].category_id is None

def test_delete_category_not_found(client):
    assert client.delete("/api/categories/999").status_code == 404
