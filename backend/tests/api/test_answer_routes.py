"""Answer routes — nested creation, lookups, and the 400/404/422 mapping."""

USER_ID = "2b0f6c9e-8f2d-4a51-9d3e-6f1d2c3b4a59"


async def _answer_count(client, question_id: int) -> int:
    res = await client.get(f"/questions/{question_id}")
    return len(res.json()["answers"])


async def test_add_answer_without_question_id_uses_path(client, seed_question):
    res = await client.post(
        f"/questions/{seed_question.id}/answers",
        json={"text": "Paris", "user_id": USER_ID},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["question_id"] == seed_question.id
    assert body["user_id"] == USER_ID
    assert body["id"] > 0


async def test_add_answer_matching_question_id_is_accepted(client, seed_question):
    res = await client.post(
        f"/questions/{seed_question.id}/answers",
        json={"text": "Paris", "user_id": USER_ID, "question_id": seed_question.id},
    )
    assert res.status_code == 201


async def test_add_answer_mismatched_question_id_is_400(client, seed_question):
    res = await client.post(
        f"/questions/{seed_question.id}/answers",
        json={"text": "Paris", "user_id": USER_ID, "question_id": seed_question.id + 1},
    )
    assert res.status_code == 400
    assert res.json()["status_code"] == 400
    assert await _answer_count(client, seed_question.id) == 0


async def test_add_answer_to_missing_question_is_422(client):
    res = await client.post(
        "/questions/999999/answers", json={"text": "Paris", "user_id": USER_ID},
    )
    assert res.status_code == 422
    assert res.json()["status_code"] == 422
    assert "not found" in res.json()["error"]


async def test_add_answer_invalid_user_id_is_400(client, seed_question):
    res = await client.post(
        f"/questions/{seed_question.id}/answers",
        json={"text": "Paris", "user_id": "not-a-uuid"},
    )
    assert res.status_code == 400


async def test_add_answer_missing_text_is_400(client, seed_question):
    res = await client.post(
        f"/questions/{seed_question.id}/answers", json={"user_id": USER_ID},
    )
    assert res.status_code == 400


async def test_add_answer_duplicate_id_is_422(client, seed_question):
    payload = {"id": 4, "text": "Paris", "user_id": USER_ID}
    first = await client.post(f"/questions/{seed_question.id}/answers", json=payload)
    assert first.status_code == 201
    res = await client.post(f"/questions/{seed_question.id}/answers", json=payload)
    assert res.status_code == 422
    assert "already exist" in res.json()["error"]


async def test_list_answers_of_question(client, seed_question, insert_answer, at):
    await insert_answer(seed_question.id, "later", at(9))
    await insert_answer(seed_question.id, "sooner", at(1))
    res = await client.get(f"/questions/{seed_question.id}/answers")
    assert res.status_code == 200
    assert [a["text"] for a in res.json()] == ["sooner", "later"]

    missing = await client.get("/questions/999999/answers")
    assert missing.status_code == 404


async def test_get_answer(client, seed_question):
    created = (await client.post(
        f"/questions/{seed_question.id}/answers",
        json={"text": "Paris", "user_id": USER_ID},
    )).json()
    res = await client.get(f"/answers/{created['id']}")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == created["id"]
    assert body["question_id"] == seed_question.id
    assert body["user_id"] == USER_ID
    assert body["text"] == "Paris"


async def test_get_missing_answer_is_404(client):
    res = await client.get("/answers/999999")
    assert res.status_code == 404
    assert res.json() == {"error": "Answer with id=999999 not found", "status_code": 404}


async def test_delete_answer_then_again_is_404(client, seed_question):
    created = (await client.post(
        f"/questions/{seed_question.id}/answers",
        json={"text": "Paris", "user_id": USER_ID},
    )).json()
    res = await client.delete(f"/answers/{created['id']}")
    assert res.status_code == 204
    again = await client.delete(f"/answers/{created['id']}")
    assert again.status_code == 404
    assert (await client.get(f"/answers/{created['id']}")).status_code == 404


async def test_answers_hidden_after_question_deleted(client, seed_question):
    created = (await client.post(
        f"/questions/{seed_question.id}/answers",
        json={"text": "Paris", "user_id": USER_ID},
    )).json()
    await client.delete(f"/questions/{seed_question.id}")
    res = await client.get(f"/answers/{created['id']}")
    assert res.status_code == 404


async def test_add_answer_with_zero_id_gets_assigned_id(client, seed_question):
    res = await client.post(
        f"/questions/{seed_question.id}/answers",
        json={"id": 0, "question_id": 0, "text": "Paris", "user_id": USER_ID},
    )
    assert res.status_code == 201
    assert res.json()["id"] > 0


async def test_out_of_range_ids_are_400(client):
    huge = "99999999999999999999"
    res = await client.post(
        f"/questions/{huge}/answers", json={"text": "Paris", "user_id": USER_ID},
    )
    assert res.status_code == 400
    assert res.json()["status_code"] == 400
    assert (await client.get(f"/questions/{huge}/answers")).status_code == 400
    assert (await client.get(f"/answers/{huge}")).status_code == 400
    assert (await client.delete(f"/answers/{huge}")).status_code == 400


async def test_add_answer_out_of_range_body_id_is_400(client, seed_question):
    res = await client.post(
        f"/questions/{seed_question.id}/answers",
        json={"id": 2**63, "text": "Paris", "user_id": USER_ID},
    )
    assert res.status_code == 400
    assert await _answer_count(client, seed_question.id) == 0
