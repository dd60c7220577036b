"""Tests for LLMClientBuilder and ConfiguredClient."""

from unittest import IsolatedAsyncioTestCase
from unittest.mock import AsyncMock, MagicMock

from llm_bridge.core.providers import register_default_factories
from llm_bridge.core.registry import FactoryRegistry
from llm_bridge.service.builder import ConfiguredClient, LLMClientBuilder
from llm_bridge.service.chat_service import ChatService
from llm_bridge.service.errors import MissingFieldError, UnsupportedModelError
from llm_bridge.types.config import ProviderConfig
from llm_bridge.types.options import ChatOptions
from llm_bridge.types.responses import ChatResponse, UsageStatistics

from .utils import collect, joined


class LLMClientBuilderTests(IsolatedAsyncioTestCase):
    def setUp(self):
        self.registry = FactoryRegistry()
        register_default_factories(self.registry)
        self.service = ChatService(registry=self.registry)

    def _builder(self):
        return LLMClientBuilder(self.service)

    def test_build_without_anything_reports_platform(self):
        with self.assertRaises(MissingFieldError) as ctx:
            self._builder().build()
        self.assertEqual(ctx.exception.field, "platform")
        self.assertIn("platform", str(ctx.exception))

    def test_build_without_model_reports_model(self):
        with self.assertRaises(MissingFieldError) as ctx:
            self._builder().with_platform("ollama").build()
        self.assertEqual(ctx.exception.field, "model")

    def test_build_without_platform_regardless_of_order(self):
        with self.assertRaises(MissingFieldError) as ctx:
            self._builder().with_model("llama3").build()
        self.assertEqual(ctx.exception.field, "platform")

    def test_empty_strings_count_as_missing(self):
        with self.assertRaises(MissingFieldError) as ctx:
            self._builder().with_platform("ollama").with_model("").build()
        self.assertEqual(ctx.exception.field, "model")
        self.assertIsNone(self.service.get_current_configuration())

    def test_build_in_any_order_configures_service(self):
        client = self._builder().with_model("llama3").with_platform("ollama").build()
        self.assertIsInstance(client, ConfiguredClient)
        self.assertEqual(client.configuration, ProviderConfig(platform="ollama", model="llama3"))
        self.assertEqual(
            self.service.get_current_configuration(),
            ProviderConfig(platform="ollama", model="llama3"),
        )

    def test_later_calls_override_earlier(self):
        client = (
            self._builder()
            .with_platform("bedrock")
            .with_model("mistral.large")
            .with_platform("azure")
            .with_model("gpt-4o")
            .build()
        )
        self.assertEqual(client.configuration, ProviderConfig(platform="azure", model="gpt-4o"))

    def test_build_propagates_unsupported_model(self):
        with self.assertRaises(UnsupportedModelError):
            self._builder().with_platform("azure").with_model("llama3").build()

    def test_default_options_merge_across_calls(self):
        client = (
            self._builder()
            .with_platform("ollama")
            .with_model("llama3")
            .with_default_options(ChatOptions(temperature=0.5, max_tokens=10))
            .with_default_options(ChatOptions(max_tokens=20, system_prompt="hi"))
            .build()
        )
        self.assertEqual(
            client.default_options,
            ChatOptions(temperature=0.5, max_tokens=20, system_prompt="hi"),
        )

    def test_builder_without_service_creates_one(self):
        builder = LLMClientBuilder()
        self.assertIsInstance(builder._service, ChatService)

    async def test_end_to_end_with_stub_backend(self):
        client = (
            self._builder()
            .with_platform("ollama")
            .with_model("llama3")
            .with_default_options(ChatOptions(temperature=0.5))
            .build()
        )
        response = await client.send("Explain the benefits of adapters.")
        self.assertEqual(response.model, "llama3")
        self.assertIn("Ollama response", response.content)
        chunks = await collect(client.stream("Explain the benefits of adapters."))
        self.assertEqual(joined(chunks), response.content)


class ConfiguredClientOptionTests(IsolatedAsyncioTestCase):
    def setUp(self):
        self.service = MagicMock(spec=ChatService)
        self.service.send = AsyncMock(
            return_value=ChatResponse(model="m", content="c", usage=UsageStatistics.from_counts(0, 0))
        )
        self.defaults = ChatOptions(temperature=0.5, max_tokens=100, metadata={"a": 1})
        self.client = ConfiguredClient(self.service, self.defaults)

    async def test_send_without_options_uses_defaults(self):
        await self.client.send("hi")
        self.service.send.assert_awaited_once_with("hi", self.defaults)

    async def test_per_call_options_take_precedence(self):
        await self.client.send("hi", ChatOptions(temperature=0.9, metadata={"b": 2}))
        _, options = self.service.send.await_args.args
        self.assertEqual(options.temperature, 0.9)
        self.assertEqual(options.max_tokens, 100)
        self.assertEqual(options.metadata, {"b": 2})

    def test_stream_merges_options(self):
        self.client.stream("hi", ChatOptions(max_tokens=5))
        _, options = self.service.stream.call_args.args
        self.assertEqual(options.temperature, 0.5)
        self.assertEqual(options.max_tokens, 5)
