from design_patterns.behavioral.observer import MessageBroker, Subscriber


def test_publish_reaches_only_topic_subscribers():
    broker = MessageBroker()
    first, second, third = Subscriber("s1"), Subscriber("s2"), Subscriber("s3")
    broker.subscribe("topic_1", first)
    broker.subscribe("topic_2", second)
    broker.subscribe("topic_2", third)

    assert broker.publish("topic_2", "aloh") == 2
    assert first.received == []
    assert second.received == ["aloh"]
    assert third.received == ["aloh"]


def test_subscribe_twice_notifies_once():
    broker = MessageBroker()
    subscriber = Subscriber("s1")
    broker.subscribe("t", subscriber)
    broker.subscribe("t", subscriber)

    broker.publish("t", "hi")
    assert subscriber.received == ["hi"]


def test_unsubscribe_stops_delivery(capsys):
    broker = MessageBroker()
    subscriber = Subscriber("s1")
    broker.subscribe("topic_1", subscriber)

    assert broker.unsubscribe("topic_1", subscriber) is True
    assert "s1 has been unsubscribed from topic: topic_1" in capsys.readouterr().out
    assert broker.publish("topic_1", "hola") == 0
    assert subscriber.received == []


def test_unknown_topic_is_a_noop():
    broker = MessageBroker()
    assert broker.unsubscribe("nope", Subscriber("s1")) is False
    assert broker.publish("nope", "hello") == 0
    assert broker.subscribers("nope") == []


def test_subscribers_are_notified_in_order():
    broker = MessageBroker()
    order = []

    class Recorder(Subscriber):
        def update(self, message):
            order.append(self.name)

    for name in ("a", "b", "c"):
        broker.subscribe("t", Recorder(name))
    broker.publish("t", "go")
    assert order == ["a", "b", "c"]


def test_unsubscribe_non_member_of_existing_topic():
    broker = MessageBroker()
    member, outsider = Subscriber("member"), Subscriber("outsider")
    broker.subscribe("t", member)

    assert broker.unsubscribe("t", outsider) is False
    assert broker.subscribers("t") == [member]
