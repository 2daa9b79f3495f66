"""Tests for the web endpoints."""

import re

import pytest


def listed_codes(html: str):
    return re.findall(r'<a href="/s/([A-Za-z]+)">', html)


async def create(client, url: str):
    return await client.post("/new", data={"longurl": url}, follow_redirects=False)


async def newest_code(client) -> str:
    response = await client.get("/")
    return listed_codes(response.text)[0]


@pytest.mark.asyncio
class TestCreate:
    """Test POST /new."""

    async def test_create_redirects_to_index(self, client, sample_urls):
        response = await create(client, sample_urls[0])

        assert response.status_code == 302
        assert response.headers["location"] == "/"

    async def test_create_then_redirect(self, client, sample_urls):
        """Every created URL redirects back to exactly itself."""
        for url in sample_urls + [
            "https://example.com/p?q=1&r=two#frag",
            "https://example.com/a|b",
            "https://example.com/{x}",
            "https://example.com/^x",
        ]:
            await create(client, url)
            code = await newest_code(client)

            response = await client.get(f"/s/{code}", follow_redirects=False)
            assert response.status_code == 302
            assert response.headers["location"] == url

    async def test_invalid_url(self, client, test_store):
        response = await create(client, "not a url")

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("text/plain")
        assert "Invalid URL" in response.text
        assert await test_store.query_recent() == []

    @pytest.mark.parametrize("url", ["http://:80", "http://user@", "http://@/path"])
    async def test_url_without_host(self, client, test_store, url):
        response = await create(client, url)

        assert response.status_code == 400
        assert "missing host" in response.text
        assert await test_store.query_recent() == []

    async def test_non_ascii_redirect_escaped(self, client):
        await create(client, "https://example.com/café")
        code = await newest_code(client)

        response = await client.get(f"/s/{code}", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com/caf%C3%A9"

    async def test_empty_url(self, client):
        response = await create(client, "")
        assert response.status_code == 400

    async def test_missing_field(self, client):
        response = await client.post("/new", data={}, follow_redirects=False)
        assert response.status_code == 400

    async def test_lenient_policy(self, lenient_client, test_store):
        response = await create(lenient_client, "not a url")

        assert response.status_code == 302
        stored = await test_store.query_recent()
        assert [m.long_url for m in stored] == ["http://not a url"]

    async def test_wrong_method(self, client):
        response = await client.get("/new")

        assert response.status_code == 404
        assert response.text == "404 page not found"

    async def test_store_error(self, failing_client):
        response = await create(failing_client, "https://example.com")

        assert response.status_code == 500
        assert response.text == "store unavailable"

    async def test_path_prefix_redirect(self, client):
        response = await client.post(
            "/new",
            data={"longurl": "https://example.com"},
            headers={"X-Forwarded-Prefix": "/shrtn"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/shrtn/"


@pytest.mark.asyncio
class TestRedirect:
    """Test GET /s/{code}."""

    async def test_unknown_code(self, client):
        response = await client.get("/s/doesnotexist", follow_redirects=False)

        assert response.status_code == 404
        assert response.text == "404 page not found"

    async def test_empty_code(self, client):
        response = await client.get("/s/", follow_redirects=False)
        assert response.status_code == 404

    async def test_wrong_method(self, client):
        response = await client.post("/s/abc123")
        assert response.status_code == 404

    async def test_wrong_method_existing_code(self, client):
        await create(client, "https://example.com")
        code = await newest_code(client)

        response = await client.post(f"/s/{code}")
        assert response.status_code == 404

    async def test_store_error(self, failing_client):
        response = await failing_client.get("/s/abcdef", follow_redirects=False)

        assert response.status_code == 500
        assert response.text == "store unavailable"


@pytest.mark.asyncio
class TestIndex:
    """Test GET /."""

    async def test_empty_index(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'name="longurl"' in response.text
        assert listed_codes(response.text) == []

    async def test_lists_ten_newest(self, client, test_store):
        for i in range(11):
            await create(client, f"https://example.com/page_{i}")

        response = await client.get("/")
        assert response.status_code == 200

        urls = re.findall(r"redirects to (\S+)</li>", response.text)
        assert urls == [f"https://example.com/page_{i}" for i in range(10, 0, -1)]

        stored = await test_store.query_recent(10)
        assert listed_codes(response.text) == [m.short_code for m in stored]

    async def test_escapes_stored_url(self, lenient_client):
        await create(lenient_client, "<script>alert(1)</script>")

        response = await lenient_client.get("/")

        assert "<script>" not in response.text
        assert "redirects to http://&lt;script&gt;alert(1)&lt;/script&gt;" in response.text

    async def test_path_prefix(self, client):
        await create(client, "https://example.com")

        response = await client.get("/", headers={"X-Forwarded-Prefix": "/shrtn"})

        assert 'action="/shrtn/new"' in response.text
        assert 'href="/shrtn/s/' in response.text

    async def test_store_error(self, failing_client):
        response = await failing_client.get("/")

        assert response.status_code == 500
        assert response.text == "store unavailable"

    async def test_unknown_path(self, client):
        response = await client.get("/no/such/page")
        assert response.status_code == 404


@pytest.mark.asyncio
class TestHealth:
    async def test_healthy(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    async def test_unhealthy(self, failing_client):
        response = await failing_client.get("/health")

        assert response.status_code == 503
