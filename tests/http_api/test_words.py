# tests/http_api/test_words.py
from fastapi import status


def _texts(words):
    return [w["text"] for w in words]


def _submit(client, text, source=1, learning=2):
    return client.post(
        "/submit",
        json={
            "text": text,
            "source_language_id": source,
            "learning_language_id": learning,
        },
    )


def test_word_routes_are_tagged_words(client) -> None:
    paths = client.app.openapi()["paths"]
    tagged = {
        path
        for path, operations in paths.items()
        for operation in operations.values()
        if "words" in operation.get("tags", [])
    }

    assert tagged == {"/submit", "/filledwords", "/words"}


class TestSubmitEndpoint:

    def test_submit_creates_untranslated_words(self, client):
        response = _submit(client, "hola mundo hola")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["translated"] == []
        assert _texts(body["untranslated"]) == ["hola", "mundo"]
        assert body["untranslated"][0]["source_language_id"] == 1
        assert body["untranslated"][0]["target_language_id"] == 2
        assert body["untranslated"][0]["translation"] is None

    def test_submit_accepts_legacy_field_name(self, client):
        response = client.post(
            "/submit",
            json={"text": "casa", "base_language_id": 3, "learning_language_id": 1},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["untranslated"][0]["source_language_id"] == 3

    def test_resubmission_does_not_duplicate_words(self, client):
        first = _submit(client, "uno dos tres").json()
        second = _submit(client, "tres dos uno uno").json()

        assert len(client.get("/words").json()) == 3
        assert {w["id"] for w in first["untranslated"]} == {
            w["id"] for w in second["untranslated"]
        }

    def test_missing_field_is_malformed_input(self, client):
        response = client.post("/submit", json={"text": "hola"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["status"] == "error"
        assert body["error"] == "malformed_input"
        assert "source_language_id" in body["message"]

    def test_invalid_json_is_malformed_input(self, client):
        response = client.post(
            "/submit",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "malformed_input"

    def test_non_positive_language_id_is_rejected(self, client):
        response = _submit(client, "hola", source=0)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get("/words").json() == []


class TestReconcileEndpoint:

    def test_end_to_end_translation_flow(self, client):
        submitted = _submit(client, "hola mundo hola").json()
        hola = next(w for w in submitted["untranslated"] if w["text"] == "hola")

        response = client.post(
            "/filledwords",
            json={
                "updates": [
                    {"id": hola["id"], "translation": "hello", "target_language_id": 2}
                ],
                "deletions": [],
            },
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "success"
        assert response.json()["updated"] == [hola["id"]]

        again = _submit(client, "hola mundo hola").json()
        assert _texts(again["translated"]) == ["hola"]
        assert again["translated"][0]["translation"] == "hello"
        assert _texts(again["untranslated"]) == ["mundo"]

    def test_deletions_are_idempotent(self, client):
        words = _submit(client, "uno dos").json()["untranslated"]
        uno_id = words[0]["id"]

        first = client.post("/filledwords", json={"deletions": [{"id": uno_id}]})
        second = client.post(
            "/filledwords", json={"deletions": [{"id": uno_id}, {"id": 999}]}
        )

        assert first.json()["deleted"] == [uno_id]
        assert second.status_code == status.HTTP_200_OK
        assert second.json()["skipped_deletions"] == [uno_id, 999]
        assert _texts(client.get("/words").json()) == ["dos"]

    def test_update_isolation(self, client):
        words = _submit(client, "uno dos").json()["untranslated"]
        uno_id, dos_id = words[0]["id"], words[1]["id"]

        response = client.post(
            "/filledwords",
            json={
                "updates": [
                    {"id": uno_id, "translation": "one"},
                    {"id": dos_id, "translation": "two"},
                ],
                "deletions": [{"id": uno_id}],
            },
        )

        body = response.json()
        assert response.status_code == status.HTTP_200_OK
        assert body["failed_updates"] == [uno_id]
        assert body["updated"] == [dos_id]
        stored = client.get("/words").json()
        assert [(w["text"], w["translation"]) for w in stored] == [("dos", "two")]

    def test_legacy_payload_shape(self, client):
        words = _submit(client, "gato perro").json()["untranslated"]
        gato, perro = words

        response = client.post(
            "/filledwords",
            json={
                "wordsList": [
                    {
                        "ID": gato["id"],
                        "MainWord": "gato",
                        "BaseLanguageID": 1,
                        "TranslateWord": "cat",
                        "LearningLanguageID": 2,
                    }
                ],
                "deletedWords": [{"ID": perro["id"], "MainWord": "perro"}],
            },
        )

        assert response.status_code == status.HTTP_200_OK
        stored = client.get("/words").json()
        assert [(w["text"], w["translation"]) for w in stored] == [("gato", "cat")]

    def test_omitted_translation_keeps_value_and_null_clears_it(self, client):
        word = _submit(client, "sol").json()["untranslated"][0]
        client.post(
            "/filledwords",
            json={"updates": [{"id": word["id"], "translation": "sun"}]},
        )

        client.post(
            "/filledwords",
            json={"updates": [{"id": word["id"], "target_language_id": 4}]},
        )
        kept = client.get("/words").json()[0]
        assert kept["translation"] == "sun"
        assert kept["target_language_id"] == 4

        client.post(
            "/filledwords",
            json={"updates": [{"id": word["id"], "translation": None}]},
        )
        assert client.get("/words").json()[0]["translation"] is None

    def test_null_lists_are_treated_as_empty(self, client):
        response = client.post(
            "/filledwords", json={"wordsList": None, "deletedWords": None}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["updated"] == []

    def test_malformed_update_entry(self, client):
        response = client.post(
            "/filledwords", json={"updates": [{"translation": "no id"}]}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "malformed_input"


def test_list_words_empty(client):
    response = client.get("/words")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []
