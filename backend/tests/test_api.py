def test_graph_endpoint(client):
    response = client.get("/graph/")
    assert response.status_code == 200

    body = response.json()
    assert [n["id"] for n in body["nodes"]] == ["1", "2", "3"]
    assert [e["id"] for e in body["edges"]] == ["e1-2", "e1-3"]
    assert body["nodes"][0]["type"] == "colored"
    assert body["nodes"][0]["data"]["label"] == "Welcome(...)"
    assert body["history"] == {"length": 1, "index": 0, "can_undo": False, "can_redo": False}


def test_graph_stats(client):
    body = client.get("/graph/stats").json()

    assert body["nodes"] == 3
    assert body["edges"] == 2
    assert body["valid"] is True
    assert body["dangling_edges"] == []
    assert body["history_length"] == 1


def test_create_and_undo_node(client):
    created = client.post("/graph/nodes")
    assert created.status_code == 201

    body = created.json()
    new_id = body["node"]["id"]
    assert new_id.startswith("node-")
    assert body["node"]["data"]["title"] == "New Node"
    assert body["history"]["can_undo"] is True

    undone = client.post("/history/undo")
    assert undone.status_code == 200
    assert new_id not in [n["id"] for n in undone.json()["nodes"]]

    assert client.post("/history/undo").status_code == 409

    redone = client.post("/history/redo")
    assert new_id in [n["id"] for n in redone.json()["nodes"]]
    assert client.post("/history/redo").status_code == 409


def test_duplicate_node(client):
    client.put("/graph/nodes/2/position", json={"x": 100, "y": 100})

    response = client.post("/graph/nodes/2/duplicate")
    assert response.status_code == 201

    node = response.json()["node"]
    assert node["position"] == {"x": 150.0, "y": 150.0}
    assert node["data"]["title"] == "Ideas (Copy)"


def test_content_edit_and_commit(client):
    response = client.put(
        "/graph/nodes/3/content",
        json={"title": "Chores", "color": "#123456", "description": ""},
    )
    assert response.status_code == 200

    body = response.json()
    assert body["node"]["data"]["label"] == "Chores"
    assert body["history"]["length"] == 1

    committed = client.post("/history/commit").json()
    assert committed["captured"] is True
    assert committed["history"]["length"] == 2
    assert client.get("/history/").json()["can_undo"] is True


def test_content_edit_requires_title(client):
    response = client.put("/graph/nodes/3/content", json={"color": "#123456"})
    assert response.status_code == 422


def test_delete_node_cascades(client):
    response = client.delete("/graph/nodes/1")
    assert response.status_code == 200

    body = response.json()
    assert [n["id"] for n in body["nodes"]] == ["2", "3"]
    assert body["edges"] == []


def test_unknown_ids_return_404(client):
    assert client.delete("/graph/nodes/missing").status_code == 404
    assert client.post("/graph/nodes/missing/duplicate").status_code == 404
    assert client.get("/graph/nodes/missing/neighbors").status_code == 404
    assert client.delete("/graph/edges/missing").status_code == 404
    assert client.post("/graph/edges", json={"source": "1", "target": "missing"}).status_code == 404
    assert client.get("/history/").json()["length"] == 1


def test_connect_and_neighbors(client):
    created = client.post("/graph/edges", json={"source": "3", "target": "2"})
    assert created.status_code == 201
    edge_id = created.json()["edge"]["id"]

    body = client.get("/graph/nodes/2/neighbors").json()
    assert body["successors"] == []
    assert sorted(body["predecessors"]) == ["1", "3"]
    assert [e["id"] for e in body["edges"]] == ["e1-2", edge_id]

    removed = client.delete(f"/graph/edges/{edge_id}")
    assert removed.status_code == 200
    assert len(removed.json()["edges"]) == 2


def test_selection(client):
    one = client.post("/graph/selection", json={"node_ids": ["2"]}).json()
    assert one["selected"] == ["2"]
    assert one["editing"]["id"] == "2"

    two = client.post("/graph/selection", json={"node_ids": ["1", "2"]}).json()
    assert two["selected"] == ["1", "2"]
    assert two["editing"] is None
