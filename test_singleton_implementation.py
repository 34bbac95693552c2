#!/usr/bin/env python3
"""
Test script to verify the singleton pattern implementation.

This script tests:
1. Singleton instance creation and uniqueness
2. Configuration management
3. Catalog manager functionality
4. Thread safety of singleton implementations

Run this script directly or through pytest.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from pattern_catalog.core.config_manager import ConfigManager, Settings, config_manager
from pattern_catalog.core.catalog_manager import CatalogManager, catalog_manager
from pattern_catalog.core.patterns.singleton import Singleton, SharedInstance


def test_singleton_uniqueness():
    """Test that singletons return the same instance."""
    print("Testing singleton uniqueness...")

    instances = [SharedInstance.get_instance() for _ in range(25)] + [SharedInstance()]
    assert all(instance is instances[0] for instance in instances), "SharedInstance instances are not the same!"
    assert instances[0].foo == "bar"
    print("✓ SharedInstance singleton test passed")

    config1 = ConfigManager.get_instance()
    config2 = ConfigManager()
    assert config1 is config2 is config_manager, "ConfigManager instances are not the same!"
    print("✓ ConfigManager singleton test passed")

    catalog1 = CatalogManager.get_instance()
    catalog2 = CatalogManager()
    assert catalog1 is catalog2 is catalog_manager, "CatalogManager instances are not the same!"
    print("✓ CatalogManager singleton test passed")


def test_distinct_classes_get_distinct_instances():
    class Counter(Singleton):
        def _setup(self):
            self.value = 0

    class Tally(Singleton):
        def _setup(self):
            self.value = 0

    counter = Counter.get_instance()
    counter.value += 1
    assert Counter().value == 1
    assert Tally() is not counter
    assert Tally().value == 0


def test_setup_runs_once_and_reset_reruns_it():
    class Tracker(Singleton):
        setups = 0

        def _setup(self):
            type(self).setups += 1
            self.items = []

    tracker = Tracker()
    tracker.items.append("x")
    Tracker()
    Tracker.get_instance()
    assert Tracker.setups == 1
    assert Tracker().items == ["x"]

    tracker.reset()
    assert Tracker.setups == 2
    assert Tracker().items == []


def test_setup_may_build_another_singleton():
    class Inner(Singleton):
        def _setup(self):
            self.ready = True

    class Outer(Singleton):
        def _setup(self):
            self.inner = Inner.get_instance()

    built = []
    worker = threading.Thread(target=lambda: built.append(Outer.get_instance()), daemon=True)
    worker.start()
    worker.join(timeout=2)

    assert not worker.is_alive(), "Building Inner from Outer._setup blocked"
    assert built[0].inner is Inner()
    assert Inner().ready


def test_thread_safety():
    """Test thread safety of singleton implementations."""
    print("\nTesting thread safety...")

    class Slow(Singleton):
        def _setup(self):
            self.created = True

    instances = {"slow": [], "shared": [], "config": []}

    def create_instances():
        instances["slow"].append(Slow.get_instance())
        instances["shared"].append(SharedInstance.get_instance())
        instances["config"].append(ConfigManager.get_instance())

    with ThreadPoolExecutor(max_workers=10) as executor:
        futures = [executor.submit(create_instances) for _ in range(20)]
        for future in futures:
            future.result()

    for name, created in instances.items():
        distinct = set(id(instance) for instance in created)
        assert len(distinct) == 1, f"{name} not thread-safe: {len(distinct)} different instances"

    print("✓ Thread safety test passed")


def test_config_manager():
    """Test ConfigManager functionality."""
    print("\nTesting ConfigManager functionality...")

    settings = config_manager.settings
    assert isinstance(settings, Settings), "Settings not accessible"

    proxy_settings = config_manager.get_proxy_settings()
    assert set(proxy_settings) == {"stock_count", "stock_count_delay", "single_flight_inventory"}
    assert isinstance(config_manager.is_debug_mode(), bool), "Debug mode not boolean"
    assert isinstance(config_manager.get_log_level(), int)
    print("✓ Config accessors working")


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PATTERN_CATALOG_STOCK_COUNT", "7")
    monkeypatch.setenv("PATTERN_CATALOG_SINGLE_FLIGHT_INVENTORY", "false")
    settings = Settings()
    assert settings.stock_count == 7
    assert settings.single_flight_inventory is False


def test_reload_settings(monkeypatch):
    monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "debug")
    try:
        config_manager.reload_settings()
        assert config_manager.get_log_level() == 10
    finally:
        monkeypatch.delenv("PATTERN_CATALOG_LOG_LEVEL")
        config_manager.reload_settings()


def test_catalog_manager():
    """Test CatalogManager functionality."""
    print("\nTesting CatalogManager functionality...")

    expected = {"singleton", "factory", "iterator", "decorator", "strategy",
                "facade", "proxy", "adapter", "composite", "observer"}
    assert expected <= set(catalog_manager.list_patterns()), "Core patterns not registered"
    assert catalog_manager.get_pattern("singleton") is SharedInstance
    print("✓ Core patterns registered")

    test_pattern = object()
    catalog_manager.register_pattern("test_pattern", test_pattern)
    assert catalog_manager.has_pattern("test_pattern"), "Custom pattern not registered"
    assert catalog_manager.get_pattern("test_pattern") is test_pattern
    assert catalog_manager.unregister_pattern("test_pattern")
    assert not catalog_manager.has_pattern("test_pattern"), "Custom pattern not unregistered"
    assert not catalog_manager.unregister_pattern("test_pattern")
    assert catalog_manager.get_pattern("test_pattern") is None
    print("✓ Custom pattern registration working")

    status = catalog_manager.get_catalog_status()
    assert status["patterns_registered"] == len(catalog_manager.list_patterns())
    assert status["constructs"]["factory"] == "ShipFactory"
    print("✓ Catalog status accessible")


def main():
    """Run the tests that need no pytest fixtures."""
    print("🔍 Testing Singleton Pattern Implementation")
    print("=" * 50)

    test_singleton_uniqueness()
    test_distinct_classes_get_distinct_instances()
    test_setup_runs_once_and_reset_reruns_it()
    test_setup_may_build_another_singleton()
    test_thread_safety()
    test_config_manager()
    test_catalog_manager()

    print("\n" + "=" * 50)
    print("🎉 All tests passed! Singleton pattern implementation is working correctly.")
    return True


if __name__ == "__main__":
    success = main()
    exit(0 if success else 1)
