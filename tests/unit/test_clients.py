"""Tests for the upstream HTTP clients."""

from unittest.mock import AsyncMock

import httpx
import pytest

from app.repositories import UpstreamRepository
from congress_client import (
    BillClient,
    FailureCause,
    RepresentativeClient,
    ResourceClass,
    UpstreamError,
    VotingClient,
    set_api_config,
)
from congress_client import base


@pytest.fixture(autouse=True)
def api_config(monkeypatch):
    monkeypatch.setattr(base, "API_BASE_URL", "https://congress.test/v3")
    monkeypatch.setattr(base, "API_KEY", "secret")
    monkeypatch.setattr(base, "REQUEST_DELAY", 0)
    monkeypatch.setattr(base, "API_TIMEOUT", 30)


def transport(handler):
    requests = []

    def record(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    return httpx.MockTransport(record), requests


class TestVotingClient:
    @pytest.mark.asyncio
    async def test_house_votes_request(self):
        mock, requests = transport(lambda r: httpx.Response(200, json={"houseRollCallVotes": []}))

        async with VotingClient(transport=mock) as client:
            data = await client.house_votes(119, 2, 100)
            assert client.request_count == 1

        assert data == {"houseRollCallVotes": []}
        url = requests[0].url
        assert url.path == "/v3/house-vote/119/2"
        assert url.params["api_key"] == "secret"
        assert url.params["limit"] == "100"
        assert url.params["sort"] == "startedDate desc"

    @pytest.mark.asyncio
    async def test_detail_and_members_paths(self):
        mock, requests = transport(
            lambda r: httpx.Response(
                200, json={"houseRollCallVote": {}, "houseRollCallVoteMemberVotes": {"results": []}}
            )
        )

        async with VotingClient(transport=mock) as client:
            await client.house_vote(119, 2, 42)
            await client.house_vote_members(119, 2, 42)

        assert [r.url.path for r in requests] == [
            "/v3/house-vote/119/2/42",
            "/v3/house-vote/119/2/42/members",
        ]

    @pytest.mark.asyncio
    async def test_non_success_status(self):
        mock, _ = transport(lambda r: httpx.Response(429, json={"error": "rate limited"}))

        async with VotingClient(transport=mock) as client:
            with pytest.raises(UpstreamError) as exc:
                await client.house_vote(119, 2, 42)

        assert exc.value.resource == ResourceClass.VOTE_DETAIL
        assert exc.value.cause == FailureCause.STATUS
        assert exc.value.status_code == 429

    @pytest.mark.asyncio
    async def test_body_not_json(self):
        mock, _ = transport(lambda r: httpx.Response(200, text="<html>maintenance</html>"))

        async with VotingClient(transport=mock) as client:
            with pytest.raises(UpstreamError) as exc:
                await client.house_votes(119, 2, 100)

        assert exc.value.cause == FailureCause.MALFORMED

    @pytest.mark.asyncio
    async def test_missing_required_key(self):
        mock, _ = transport(lambda r: httpx.Response(200, json={"pagination": {}}))

        async with VotingClient(transport=mock) as client:
            with pytest.raises(UpstreamError) as exc:
                await client.house_votes(119, 2, 100)

        assert exc.value.cause == FailureCause.MALFORMED
        assert "houseRollCallVotes" in str(exc.value)

    @pytest.mark.asyncio
    async def test_json_array_is_malformed(self):
        mock, _ = transport(lambda r: httpx.Response(200, json=[1, 2]))

        async with VotingClient(transport=mock) as client:
            with pytest.raises(UpstreamError) as exc:
                await client.house_vote_members(119, 2, 42)

        assert exc.value.cause == FailureCause.MALFORMED

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        mock, _ = transport(handler)

        async with VotingClient(transport=mock) as client:
            with pytest.raises(UpstreamError) as exc:
                await client.house_vote(119, 2, 42)

        assert exc.value.cause == FailureCause.TIMEOUT
        assert exc.value.status_code is None

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        mock, requests = transport(handler)

        async with VotingClient(transport=mock) as client:
            with pytest.raises(UpstreamError) as exc:
                await client.house_vote(119, 2, 42)

        assert exc.value.cause == FailureCause.NETWORK
        assert len(requests) == 1

    @pytest.mark.asyncio
    async def test_members_payload_without_votes(self):
        mock, _ = transport(lambda r: httpx.Response(200, json={"error": "rate limited"}))

        async with VotingClient(transport=mock) as client:
            with pytest.raises(UpstreamError) as exc:
                await client.house_vote_members(119, 2, 42)

        assert exc.value.resource == ResourceClass.VOTE_MEMBERS
        assert exc.value.cause == FailureCause.MALFORMED

    @pytest.mark.asyncio
    async def test_malformed_members_not_cached(self, store):
        mock, requests = transport(lambda r: httpx.Response(200, json={"error": "rate limited"}))

        async with VotingClient(transport=mock) as client:
            repo = UpstreamRepository(store, client, AsyncMock(), AsyncMock())
            for _ in range(2):
                with pytest.raises(UpstreamError):
                    await repo.vote_members(119, 2, 42)

        assert len(store) == 0
        assert len(requests) == 2

    @pytest.mark.asyncio
    async def test_timeout_covers_request_delay(self, monkeypatch):
        monkeypatch.setattr(base, "API_TIMEOUT", 0.05)
        monkeypatch.setattr(base, "REQUEST_DELAY", 5)
        mock, requests = transport(lambda r: httpx.Response(200, json={"houseRollCallVote": {}}))

        async with VotingClient(transport=mock) as client:
            with pytest.raises(UpstreamError) as exc:
                await client.house_vote(119, 2, 42)

        assert exc.value.cause == FailureCause.TIMEOUT
        assert requests == []

    @pytest.mark.asyncio
    async def test_timeout_while_queued(self, monkeypatch):
        monkeypatch.setattr(base, "API_TIMEOUT", 0.05)
        mock, _ = transport(lambda r: httpx.Response(200, json={"houseRollCallVote": {}}))

        async with VotingClient(max_concurrent=1, transport=mock) as client:
            await client._sem.acquire()
            try:
                with pytest.raises(UpstreamError) as exc:
                    await client.house_vote(119, 2, 42)
            finally:
                client._sem.release()

        assert exc.value.cause == FailureCause.TIMEOUT


class TestBillClient:
    @pytest.mark.asyncio
    async def test_titles_and_summaries(self):
        mock, requests = transport(lambda r: httpx.Response(200, json={r.url.path.rsplit("/", 1)[-1]: []}))

        async with BillClient(transport=mock) as client:
            await client.titles(119, "HR", "100")
            await client.summaries(119, "hr", "100")

        assert [r.url.path for r in requests] == [
            "/v3/bill/119/hr/100/titles",
            "/v3/bill/119/hr/100/summaries",
        ]

    @pytest.mark.asyncio
    async def test_failure_resource_class(self):
        mock, _ = transport(lambda r: httpx.Response(404))

        async with BillClient(transport=mock) as client:
            with pytest.raises(UpstreamError) as exc:
                await client.summaries(119, "hr", "100")

        assert exc.value.resource == ResourceClass.BILL_SUMMARY

    @pytest.mark.asyncio
    async def test_payload_without_endpoint_key(self):
        mock, _ = transport(lambda r: httpx.Response(200, json={"titles": []}))

        async with BillClient(transport=mock) as client:
            with pytest.raises(UpstreamError) as exc:
                await client.summaries(119, "hr", "100")

        assert exc.value.resource == ResourceClass.BILL_SUMMARY
        assert exc.value.cause == FailureCause.MALFORMED

    @pytest.mark.asyncio
    async def test_unsupported_endpoint(self):
        async with BillClient(transport=httpx.MockTransport(lambda r: httpx.Response(200))) as client:
            with pytest.raises(ValueError):
                await client.bill_resource(119, "hr", "100", "actions")


class TestRepresentativeClient:
    @pytest.mark.asyncio
    async def test_parses_json_served_as_html(self):
        body = '{"results":[{"name":"Blake D. Moore","state":"UT","district":"1"}]}'
        mock, requests = transport(
            lambda r: httpx.Response(200, text=body, headers={"content-type": "text/html"})
        )

        async with RepresentativeClient(transport=mock, lookup_url="https://reps.test/getall_mems.php") as client:
            data = await client.members_by_zip("84101")

        assert data["results"][0]["name"] == "Blake D. Moore"
        assert requests[0].url.params["zip"] == "84101"
        assert requests[0].url.params["output"] == "json"
        assert "api_key" not in requests[0].url.params

    @pytest.mark.asyncio
    async def test_status_error(self):
        mock, _ = transport(lambda r: httpx.Response(500))

        async with RepresentativeClient(transport=mock) as client:
            with pytest.raises(UpstreamError) as exc:
                await client.members_by_zip("84101")

        assert exc.value.resource == ResourceClass.REP_LOOKUP


class TestApiConfig:
    def test_set_api_config_overrides_only_given_values(self):
        set_api_config(base_url="https://other.test/v3", timeout=5)
        assert base.API_BASE_URL == "https://other.test/v3"
        assert base.API_TIMEOUT == 5
        assert base.API_KEY == "secret"
