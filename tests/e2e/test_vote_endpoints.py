"""End-to-end tests for voting endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from persona.interface.api.app import create_app
from tests.conftest import PROFILE_PAYLOAD as PROFILE
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by an in-memory test container."""
    return TestClient(create_app(build_test_container()))


@pytest.fixture
def comment_id(client):
    """Create a profile and one comment on it."""
    client.post("/api/profile", json=PROFILE)
    response = client.post(
        "/api/comments",
        json={"profileId": 1, "content": "Strong Fe here.", "author": "tester"},
    )
    return response.json()["comment"]["id"]


def _vote(client, comment_id, value, system="mbti", agent="agent-a"):
    return client.post(
        f"/api/comments/{comment_id}/vote",
        json={"personalitySystem": system, "personalityValue": value},
        headers={"User-Agent": agent},
    )


class TestVoteEndpoints:
    """End-to-end tests for vote API endpoints."""

    def test_first_vote_201_then_update_200(self, client, comment_id):
        # Act
        first = _vote(client, comment_id, "INTJ")
        second = _vote(client, comment_id, "ENFP")
        stats = client.get(f"/api/comments/{comment_id}/votes/stats")

        # Assert
        assert first.status_code == 201
        assert first.json()["isUpdate"] is False
        assert second.status_code == 200
        assert second.json()["message"] == "Vote updated successfully"
        body = stats.json()
        assert body["voteStats"]["mbti"] == {"ENFP": 1}
        assert body["totalVotes"] == 1

    def test_distinct_user_agents_are_distinct_voters(self, client, comment_id):
        # Act
        _vote(client, comment_id, "INTJ", agent="agent-a")
        _vote(client, comment_id, "INTJ", agent="agent-b")
        count = client.get(
            "/api/votes/count",
            params={"commentId": comment_id, "personalitySystem": "mbti"},
        )

        # Assert
        assert count.json()["count"] == 2

    def test_vote_on_missing_comment_returns_404(self, client):
        # Act
        response = _vote(client, uuid4(), "INTJ")

        # Assert
        assert response.status_code == 404
        assert response.json()["error"] == "Comment not found"

    def test_invalid_value_returns_400(self, client, comment_id):
        # Act
        response = _vote(client, comment_id, "XXXX")

        # Assert
        assert response.status_code == 400
        assert "personality_value" in response.json()["details"]

    def test_get_and_remove_own_vote(self, client, comment_id):
        # Arrange
        _vote(client, comment_id, "Leo", system="zodiac")
        headers = {"User-Agent": "agent-a"}

        # Act
        own = client.get(f"/api/comments/{comment_id}/votes/zodiac", headers=headers)
        removed = client.delete(
            f"/api/comments/{comment_id}/votes/zodiac", headers=headers
        )
        again = client.delete(
            f"/api/comments/{comment_id}/votes/zodiac", headers=headers
        )

        # Assert
        assert own.status_code == 200
        assert own.json()["vote"]["personalityValue"] == "Leo"
        assert removed.status_code == 200
        assert again.status_code == 404

    def test_list_comment_votes_hides_voter(self, client, comment_id):
        # Arrange
        _vote(client, comment_id, "INTJ")
        _vote(client, comment_id, "4w5", system="enneagram")

        # Act
        response = client.get(
            f"/api/comments/{comment_id}/votes",
            params={"personalitySystem": "enneagram"},
        )

        # Assert
        body = response.json()
        assert [v["personalityValue"] for v in body["votes"]] == ["4w5"]
        assert "voterIdentifier" not in body["votes"][0]
        assert body["pagination"]["totalCount"] == 1

    def test_bulk_reports_each_vote(self, client, comment_id):
        # Act
        response = client.post(
            "/api/votes/bulk",
            json={
                "votes": [
                    {
                        "commentId": comment_id,
                        "personalitySystem": "mbti",
                        "personalityValue": "INTJ",
                    },
                    {
                        "commentId": "not-a-uuid",
                        "personalitySystem": "mbti",
                        "personalityValue": "INTJ",
                    },
                ]
            },
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["summary"] == {"total": 2, "successful": 1, "failed": 1}
        assert body["errors"][0]["index"] == 1

    def test_empty_bulk_is_rejected(self, client):
        # Act
        response = client.post("/api/votes/bulk", json={"votes": []})

        # Assert
        assert response.status_code == 400

    def test_history_lists_callers_votes(self, client, comment_id):
        # Arrange
        _vote(client, comment_id, "INTJ", agent="agent-a")
        _vote(client, comment_id, "ENFP", agent="agent-b")

        # Act
        response = client.get("/api/votes/history", headers={"User-Agent": "agent-a"})

        # Assert
        body = response.json()
        assert [v["personalityValue"] for v in body["votes"]] == ["INTJ"]
        assert body["votes"][0]["comment"]["id"] == comment_id

    def test_deleting_profile_removes_its_comments_and_votes(self, client, comment_id):
        # Arrange
        _vote(client, comment_id, "INTJ", agent="agent-a")

        # Act
        deleted = client.delete("/api/profile/1")

        # Assert
        assert deleted.status_code == 200
        assert client.get(f"/api/comments/{comment_id}").status_code == 404
        history = client.get("/api/votes/history", headers={"User-Agent": "agent-a"})
        assert history.json()["votes"] == []

    def test_personality_stats_and_top_comments(self, client, comment_id):
        # Arrange
        _vote(client, comment_id, "INTJ", agent="agent-a")
        _vote(client, comment_id, "INTJ", agent="agent-b")
        _vote(client, comment_id, "Leo", system="zodiac")

        # Act
        stats = client.get("/api/votes/stats").json()
        top = client.get(
            "/api/votes/top-comments", params={"personalitySystem": "mbti"}
        ).json()

        # Assert
        by_system = {s["personalitySystem"]: s for s in stats["stats"]}
        assert by_system["mbti"]["distribution"] == {"INTJ": 2}
        assert by_system["mbti"]["totalVotes"] == 2
        assert by_system["zodiac"]["totalVotes"] == 1
        assert [c["id"] for c in top["comments"]] == [comment_id]

    def test_personality_values(self, client):
        # Act
        response = client.get("/api/votes/personality-values")

        # Assert
        values = response.json()["personalityValues"]
        assert len(values["mbti"]) == 16
        assert len(values["enneagram"]) == 18
        assert "Sagittarius" in values["zodiac"]

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}])
    def test_zero_pagination_on_votes_returns_400(self, client, comment_id, params):
        # Act
        listing = client.get(f"/api/comments/{comment_id}/votes", params=params)
        history = client.get("/api/votes/history", params=params)

        # Assert
        assert listing.status_code == 400
        assert history.status_code == 400
