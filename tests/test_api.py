"""
FastAPI プロトタイプのテスト
"""

from fastapi.testclient import TestClient

from api_proto import local_api

client = TestClient(local_api.app)


class TestSolveEndpoint:
    """POST /api/solve"""

    def test_solved(self):
        res = client.post("/api/solve", json={"rows": [[1], [3], [1]], "cols": [[1], [3], [1]]})
        assert res.status_code == 200
        body = res.json()
        assert body["status"] == "solved"
        assert body["solution"] == "010111010"
        assert body["board"][1] == [1, 1, 1]

    def test_contradiction_is_a_result_not_an_error(self):
        res = client.post("/api/solve", json={"rows": [[1, 1]], "cols": [[1]]})
        assert res.status_code == 200
        body = res.json()
        assert body["status"] == "contradiction"
        assert body["error"]["kind"] == "infeasible_clue"

    def test_negative_run(self):
        res = client.post("/api/solve", json={"rows": [[-1]], "cols": [[1]]})
        assert res.status_code == 400


class TestPuzzleEndpoint:
    """GET /api/puzzles/{number}/solve"""

    def test_by_number(self, puzzles_json, monkeypatch):
        monkeypatch.setattr(local_api, "DEFAULT_PUZZLES_PATH", str(puzzles_json))
        res = client.get("/api/puzzles/1/solve")
        assert res.status_code == 200
        body = res.json()
        assert body["matches_expected"] is True
        assert body["puzzle"]["number"] == 1

    def test_not_found(self, puzzles_json, monkeypatch):
        monkeypatch.setattr(local_api, "DEFAULT_PUZZLES_PATH", str(puzzles_json))
        res = client.get("/api/puzzles/404/solve")
        assert res.status_code == 404
