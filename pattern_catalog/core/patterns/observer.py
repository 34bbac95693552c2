"""
Observer / PubSub pattern: publishers announce events on a topic and every
subscribed handler is called, in subscription order.
"""

from collections import defaultdict
from itertools import count
import logging
from typing import Any, Callable, Dict, List, Tuple

from pattern_catalog.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class EventHub:
    """Topic-based publish/subscribe hub."""

    def __init__(self) -> None:
        self._topics: Dict[str, List[Tuple[int, Handler]]] = defaultdict(list)
        self._tokens = count(1)

    def subscribe(self, topic: str, handler: Handler) -> int:
        """
        Subscribe `handler` to `topic`.

        Returns:
            A token to pass to `unsubscribe`
        """
        if not topic:
            raise InvalidArgumentError("Topic required", argument="topic", value=topic)
        if not callable(handler):
            raise InvalidArgumentError("Handler must be callable", argument="handler", value=handler)
        token = next(self._tokens)
        self._topics[topic].append((token, handler))
        logger.debug(f"Subscription {token} added to '{topic}'")
        return token

    def unsubscribe(self, token: int) -> bool:
        for topic, subscriptions in self._topics.items():
            for index, (existing, _) in enumerate(subscriptions):
                if existing == token:
                    del subscriptions[index]
                    logger.debug(f"Subscription {token} removed from '{topic}'")
                    return True
        return False

    def publish(self, topic: str, *args: Any, **kwargs: Any) -> int:
        """
        Call every handler subscribed to `topic`.

        Returns:
            The number of handlers called
        """
        # Snapshot so handlers may unsubscribe while being notified
        subscriptions = list(self._topics.get(topic, ()))
        for _, handler in subscriptions:
            handler(*args, **kwargs)
        return len(subscriptions)

    def subscribers(self, topic: str) -> int:
        return len(self._topics.get(topic, ()))
