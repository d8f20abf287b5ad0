"""Integration tests for the full jirafields workflow."""

import asyncio

import pytest

from jirafields import FieldResolver, HybridConfig
from jirafields.exceptions import ResourceNotFoundError, UpstreamError

DYNAMIC = HybridConfig(dynamic_discovery_enabled=True)


class TestFullWorkflow:
    """End-to-end tests for FieldResolver."""

    @pytest.mark.asyncio
    async def test_agent_workflow(self, source) -> None:
        """Discover, read, validate and suggest as an agent would."""
        async with FieldResolver(DYNAMIC, source=source) as resolver:
            # 1. Discover what can be read
            uris = [r.uri for r in resolver.list_resources()]
            assert "jira://issue/fields" in uris

            # 2. Read the fused issue document
            doc = await resolver.read_resource("jira://issue/fields")
            assert doc.dynamic_fields == 3
            assert doc.last_dynamic_update is not None
            assert doc.fields["status"].source == "static"
            assert doc.fields["customfield_10016"].source == "dynamic"
            assert doc.path_index["customfield_10016"] == "customfield_10016"

            # 3. Validate the paths the agent plans to use
            result = await resolver.validate_field_paths(
                "issue", ["status.name", "customfield_10020", "asignee.displayName"]
            )
            assert result.is_valid is False
            assert result.path_info["customfield_10020"].field_id == "customfield_10020"
            assert result.invalid_paths == ["asignee.displayName"]
            assert result.suggestions["asignee.displayName"][0] == "assignee.displayName"

            # 4. Recover a misspelled field name
            assert resolver.suggest_field_names("issue", "asignee")[0] == "assignee"
            assert "customfield_10016" in resolver.custom_field_hints("issue", "Story Points")

        # Discovery ran once; validation was served from the cache
        assert source.calls == ["issue"]
        # An injected source belongs to the caller
        assert source.closed is False

    @pytest.mark.asyncio
    async def test_concurrent_readers_share_one_fetch(self, source) -> None:
        source.gate = asyncio.Event()
        resolver = FieldResolver(DYNAMIC, source=source)

        readers = [
            asyncio.create_task(resolver.read_fused_resource("issue")) for _ in range(5)
        ]
        await asyncio.sleep(0)
        source.gate.set()
        docs = await asyncio.gather(*readers)

        assert source.calls == ["issue"]
        assert {doc.dynamic_fields for doc in docs} == {3}

    @pytest.mark.asyncio
    async def test_upstream_failure_degrades_to_static(self, source) -> None:
        source.error = UpstreamError("Jira unavailable", status_code=503)
        resolver = FieldResolver(DYNAMIC, source=source)

        doc = await resolver.read_fused_resource("issue")
        assert doc.dynamic_fields == 0
        assert "status" in doc.fields
        assert "customfield_10016" not in doc.fields

        # Failures are not cached; recovery is picked up on the next read
        source.error = None
        doc = await resolver.read_fused_resource("issue")
        assert doc.dynamic_fields == 3
        assert source.calls == ["issue", "issue"]

    @pytest.mark.asyncio
    async def test_static_only_resolver(self) -> None:
        resolver = FieldResolver(HybridConfig())
        assert resolver.cache is None

        doc = await resolver.read_resource("jira://agile/fields")
        assert doc.dynamic_fields == 0
        assert doc.last_dynamic_update is None

        result = await resolver.validate_field_paths("issue", ["customfield_99999"])
        assert result.is_valid is True

        with pytest.raises(ResourceNotFoundError):
            await resolver.read_resource("jira://board/fields")

    @pytest.mark.asyncio
    async def test_builds_client_from_config(self) -> None:
        config = HybridConfig(jira_url="https://jira.example.com", dynamic_discovery_enabled=True)
        resolver = FieldResolver(config)
        assert resolver.cache is not None
        assert resolver.cache.max_entries == 100
        await resolver.aclose()

    @pytest.mark.asyncio
    async def test_discovery_without_url_or_source(self) -> None:
        resolver = FieldResolver(DYNAMIC)
        assert resolver.cache is None

        doc = await resolver.read_fused_resource("issue")
        assert doc.dynamic_fields == 0
        assert "status" in doc.fields
