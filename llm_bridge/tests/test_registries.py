"""Tests for FactoryRegistry and the default platform table."""

import threading
from unittest import TestCase
from unittest.mock import MagicMock

from llm_bridge.core.interfaces import ProviderFactory
from llm_bridge.core.providers import (
    DEFAULT_FACTORIES,
    AzureFactory,
    BedrockFactory,
    GoogleFactory,
    OllamaFactory,
    create_factory,
    register_default_factories,
)
from llm_bridge.core.registry import FactoryRegistry, get_factory_registry
from llm_bridge.service.errors import LLMConfigurationError, PlatformNotRegisteredError


class FactoryRegistryTests(TestCase):
    """Test FactoryRegistry register, get_factory, list_platforms and clear."""

    def test_register_empty_name_raises(self):
        registry = FactoryRegistry()
        with self.assertRaises(ValueError) as ctx:
            registry.register("", MagicMock(spec=ProviderFactory))
        self.assertIn("non-empty", str(ctx.exception))

    def test_get_factory_unknown_raises_not_registered(self):
        registry = FactoryRegistry()
        registry.register("bedrock", MagicMock(spec=ProviderFactory))
        with self.assertRaises(PlatformNotRegisteredError) as ctx:
            registry.get_factory("nowhere")
        self.assertEqual(ctx.exception.platform, "nowhere")
        self.assertIn("nowhere", str(ctx.exception))
        self.assertIn("bedrock", str(ctx.exception))

    def test_not_registered_is_a_configuration_error(self):
        with self.assertRaises(LLMConfigurationError):
            FactoryRegistry().get_factory("x")

    def test_lookup_is_case_insensitive(self):
        registry = FactoryRegistry()
        factory = MagicMock(spec=ProviderFactory)
        registry.register("Bedrock", factory)
        self.assertIs(registry.get_factory("BEDROCK"), factory)
        self.assertIs(registry.get_factory("bedrock"), factory)
        self.assertEqual(registry.list_platforms(), ["bedrock"])

    def test_last_registration_wins(self):
        registry = FactoryRegistry()
        first = MagicMock(spec=ProviderFactory)
        second = MagicMock(spec=ProviderFactory)
        registry.register("x", first)
        registry.register("X", second)
        self.assertIs(registry.get_factory("x"), second)
        self.assertEqual(registry.list_platforms(), ["x"])

    def test_list_platforms_returns_all_names(self):
        registry = FactoryRegistry()
        registry.register("a", MagicMock(spec=ProviderFactory))
        registry.register("b", MagicMock(spec=ProviderFactory))
        self.assertCountEqual(registry.list_platforms(), ["a", "b"])

    def test_clear_empties_all_platforms(self):
        registry = FactoryRegistry()
        registry.register("a", MagicMock(spec=ProviderFactory))
        registry.clear()
        self.assertEqual(registry.list_platforms(), [])
        with self.assertRaises(PlatformNotRegisteredError):
            registry.get_factory("a")

    def test_contains(self):
        registry = FactoryRegistry()
        registry.register("ollama", MagicMock(spec=ProviderFactory))
        self.assertIn("OLLAMA", registry)
        self.assertNotIn("azure", registry)
        self.assertNotIn(42, registry)

    def test_concurrent_register_and_lookup(self):
        registry = FactoryRegistry()
        factory = MagicMock(spec=ProviderFactory)
        registry.register("stable", factory)
        errors = []

        def _register(n):
            for i in range(200):
                registry.register(f"p{n}-{i}", MagicMock(spec=ProviderFactory))

        def _lookup():
            for _ in range(200):
                try:
                    self.assertIs(registry.get_factory("stable"), factory)
                except Exception as exc:  # collected for the main thread
                    errors.append(exc)

        threads = [threading.Thread(target=_register, args=(n,)) for n in range(4)]
        threads += [threading.Thread(target=_lookup) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(errors, [])
        self.assertEqual(len(registry.list_platforms()), 801)

    def test_get_factory_registry_returns_singleton(self):
        a = get_factory_registry()
        b = get_factory_registry()
        self.assertIs(a, b)


class DefaultFactoriesTests(TestCase):
    """Test the built-in platform table and bootstrap registration."""

    def test_default_table_covers_four_platforms(self):
        self.assertEqual(
            DEFAULT_FACTORIES,
            {
                "bedrock": BedrockFactory,
                "azure": AzureFactory,
                "google": GoogleFactory,
                "ollama": OllamaFactory,
            },
        )

    def test_create_factory_returns_platform_factory(self):
        factory = create_factory("Azure")
        self.assertIsInstance(factory, AzureFactory)
        self.assertIsInstance(factory, ProviderFactory)

    def test_create_factory_unknown_platform_raises(self):
        with self.assertRaises(PlatformNotRegisteredError) as ctx:
            create_factory("openrouter")
        self.assertEqual(ctx.exception.platform, "openrouter")

    def test_register_default_factories_into_given_registry(self):
        registry = FactoryRegistry()
        returned = register_default_factories(registry)
        self.assertIs(returned, registry)
        self.assertCountEqual(
            registry.list_platforms(), ["bedrock", "azure", "google", "ollama"]
        )
        self.assertIsInstance(registry.get_factory("google"), GoogleFactory)

    def test_register_default_factories_defaults_to_singleton(self):
        registry = get_factory_registry()
        registry.clear()
        try:
            register_default_factories()
            self.assertIn("bedrock", registry)
        finally:
            registry.clear()
