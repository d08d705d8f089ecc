"""
Tests for video review endpoints.
"""
from __future__ import annotations

import pytest


class TestVideos:

    @pytest.mark.asyncio
    async def test_create_video(self, client):
        payload = {
            "url": "https://res.cloudinary.com/demo/video/upload/review.mp4",
            "title": "Priya's story",
            "fileName": "review.mp4",
            "mimeType": "video/mp4",
            "publicId": "zumba-reviews/review",
        }

        response = await client.post("/api/videos", json=payload)

        assert response.status_code == 201
        body = response.json()
        assert {k: body[k] for k in payload} == payload
        assert body["_id"]
        assert body["uploadedAt"]

    @pytest.mark.asyncio
    async def test_optional_fields_default_to_empty(self, client):
        response = await client.post("/api/videos", json={"url": "https://example.com/v.mp4"})

        body = response.json()
        assert body["title"] == ""
        assert body["fileName"] == ""
        assert body["mimeType"] == ""
        assert body["publicId"] == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"url": ""}, {"title": "No link"}])
    async def test_url_required(self, client, payload):
        response = await client.post("/api/videos", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing video URL"}

    @pytest.mark.asyncio
    async def test_list_newest_first(self, client):
        await client.post("/api/videos", json={"url": "https://example.com/1.mp4"})
        await client.post("/api/videos", json={"url": "https://example.com/2.mp4"})

        response = await client.get("/api/videos")

        assert response.status_code == 200
        assert [video["url"] for video in response.json()] == [
            "https://example.com/2.mp4",
            "https://example.com/1.mp4",
        ]
