"""
Observer Pattern (Publish/Subscribe)
====================================

Core Design: A message broker keeps per-topic subscriber lists and pushes
every published message to the subscribers of that topic.

Participants:
1. Observer Interface - SubscriberBase.update()
2. Concrete Observer - Subscriber (prints and records messages)
3. Subject - MessageBroker (subscribe, unsubscribe, publish)

Features:
- Topic-based routing
- Subscribers notified in subscription order
- Subscribing twice to the same topic has no effect
"""

from abc import ABC, abstractmethod
from typing import Dict, List


class SubscriberBase(ABC):

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def update(self, message: str):
        pass


class Subscriber(SubscriberBase):

    def __init__(self, name: str):
        super().__init__(name)
        self.received: List[str] = []

    def update(self, message: str):
        self.received.append(message)
        print(f"{self.name} received a message -> \"{message}\"")


class MessageBroker:

    def __init__(self):
        self._topics: Dict[str, List[SubscriberBase]] = {}

    def subscribe(self, topic: str, subscriber: SubscriberBase):
        subscribers = self._topics.setdefault(topic, [])
        if subscriber not in subscribers:
            subscribers.append(subscriber)

    def unsubscribe(self, topic: str, subscriber: SubscriberBase) -> bool:
        subscribers = self._topics.get(topic)
        if not subscribers or subscriber not in subscribers:
            return False
        subscribers.remove(subscriber)
        print(f"{subscriber.name} has been unsubscribed from topic: {topic}")
        return True

    def publish(self, topic: str, message: str) -> int:
        """Notify every subscriber of topic, returns how many were notified"""
        # copy so an observer may unsubscribe while being notified
        subscribers = list(self._topics.get(topic, []))
        for subscriber in subscribers:
            subscriber.update(message)
        return len(subscribers)

    def subscribers(self, topic: str) -> List[SubscriberBase]:
        return list(self._topics.get(topic, []))


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("OBSERVER PATTERN DEMONSTRATION")
    print("=" * 60)
    print()

    broker = MessageBroker()
    subscriber_1 = Subscriber("subscriber_1")
    subscriber_2 = Subscriber("subscriber_2")
    subscriber_3 = Subscriber("subscriber_3")

    broker.subscribe("topic_1", subscriber_1)
    broker.subscribe("topic_2", subscriber_2)
    broker.subscribe("topic_2", subscriber_3)

    print("1. Publishing to both topics:")
    broker.publish("topic_1", "hola")
    broker.publish("topic_2", "aloh")
    print()

    print("2. Unsubscribing and publishing again:")
    broker.unsubscribe("topic_1", subscriber_1)
    notified = broker.publish("topic_1", "holaaaaaaaaaa")
    print(f"Subscribers notified: {notified}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
