import asyncio
import logging
from typing import Optional

from pattern_catalog.core.config_manager import config_manager
from pattern_catalog.core.catalog_manager import catalog_manager
from pattern_catalog.core.patterns import (
    BookKeeper,
    DVRController,
    Diplomacy,
    Enchantress,
    EventHub,
    LegacyAdapter,
    LegacyDVR,
    Mage,
    MageFacade,
    Node,
    Pincer,
    RosterIterator,
    SharedInstance,
    ShipFactory,
    StockKeeper,
    make_cake,
    spawn_general,
)

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=config_manager.get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def run_demo(stock_delay: Optional[float] = None) -> dict:
    """Exercise every pattern in the catalog and collect the results."""
    results = {}

    results["singleton"] = SharedInstance.get_instance() is SharedInstance()

    results["factory"] = {kind: ShipFactory.build(kind).get_speed() for kind in ShipFactory.kinds()}

    roster = RosterIterator()
    results["iterator"] = [f"{entry.name} ({entry.team})" for entry in roster]

    cake = make_cake()
    sugar = [cake.get_sugar()]
    for decoration in ("frosting", "sprinkles"):
        cake.decorate(decoration)
        sugar.append(cake.get_sugar())
    results["decorator"] = sugar

    general = spawn_general()
    outcomes = []
    for strategy in (Pincer(), Diplomacy()):
        general.set_strategy(strategy)
        outcomes.append(general.wage_war())
    results["strategy"] = outcomes

    results["facade"] = [MageFacade(actor).invoke("fireball") for actor in (Mage(), Enchantress())]

    controller = DVRController(LegacyAdapter(LegacyDVR()))
    results["adapter"] = [controller.start_playback(), controller.stop_playback()]

    root = Node().add_child(Node("A")).add_child(Node("B"))
    results["composite"] = root.traverse("say_name")

    hub = EventHub()
    heard = []
    hub.subscribe("demo", heard.append)
    hub.publish("demo", "hello")
    results["observer"] = heard

    book_keeper = BookKeeper(StockKeeper(delay=stock_delay))

    async def check_inventory():
        first = await book_keeper.get_inventory()
        second = await book_keeper.get_inventory()
        return [first, second]

    results["proxy"] = asyncio.run(check_inventory())

    for name in catalog_manager.list_patterns():
        logger.info(f"{name}: {results.get(name)}")
    return results


def main():
    configure_logging()
    logger.info("Running pattern catalog demo...")
    run_demo()
    logger.info("Demo complete")


if __name__ == "__main__":
    main()
