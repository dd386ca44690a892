from moviejournal.shared.entities import MovieReview
from moviejournal.shared.services.events import ReviewChangeListener, ReviewEventBus

from tests.conftest import RecordingListener


class ExplodingListener(ReviewChangeListener):
    def on_review_deleted(self, review_id):
        raise RuntimeError("panel went away")


class SelfRemovingListener(ReviewChangeListener):
    def __init__(self, bus):
        self.bus = bus
        self.calls = 0

    def on_reviews_cleared(self):
        self.calls += 1
        self.bus.unsubscribe(self)


def test_delivery_in_registration_order():
    bus = ReviewEventBus()
    order = []

    class Named(ReviewChangeListener):
        def __init__(self, name):
            self.name = name

        def on_reviews_bulk_deleted(self, count):
            order.append((self.name, count))

    for name in ("first", "second", "third"):
        bus.subscribe(Named(name))
    bus.reviews_bulk_deleted(3)

    assert order == [("first", 3), ("second", 3), ("third", 3)]


def test_none_and_duplicate_registrations_are_ignored():
    bus = ReviewEventBus()
    listener = RecordingListener()

    bus.subscribe(None)
    bus.subscribe(listener)
    bus.subscribe(listener)
    bus.unsubscribe(None)

    assert len(bus) == 1
    bus.review_deleted(5)
    assert listener.events == [("deleted", 5)]


def test_unsubscribe_stops_delivery():
    bus = ReviewEventBus()
    listener = RecordingListener()
    bus.subscribe(listener)
    bus.unsubscribe(listener)
    bus.unsubscribe(listener)

    bus.reviews_cleared()

    assert listener.events == []
    assert len(bus) == 0


def test_failing_listener_does_not_block_the_rest():
    bus = ReviewEventBus()
    before, after = RecordingListener(), RecordingListener()
    bus.subscribe(before)
    bus.subscribe(ExplodingListener())
    bus.subscribe(after)

    bus.review_deleted(12)

    assert before.events == [("deleted", 12)]
    assert after.events == [("deleted", 12)]


def test_listener_may_unsubscribe_while_being_notified():
    bus = ReviewEventBus()
    leaving = SelfRemovingListener(bus)
    staying = RecordingListener()
    bus.subscribe(leaving)
    bus.subscribe(staying)

    bus.reviews_cleared()
    bus.reviews_cleared()

    assert leaving.calls == 1
    assert staying.names() == ["cleared", "cleared"]


def test_base_listener_callbacks_are_no_ops():
    bus = ReviewEventBus()
    bus.subscribe(ReviewChangeListener())
    review = MovieReview("Inception", "Christopher Nolan", "Sci-Fi", 4.5, "12/15/2023")

    bus.review_added(review)
    bus.review_updated(review)
    bus.review_deleted(1)
    bus.reviews_bulk_deleted(2)
    bus.reviews_cleared()


def test_review_payload_is_passed_through():
    bus = ReviewEventBus()
    listener = RecordingListener()
    bus.subscribe(listener)
    review = MovieReview("Inception", "Christopher Nolan", "Sci-Fi", 4.5, "12/15/2023", id=3)

    bus.review_added(review)
    bus.review_updated(review)

    assert listener.events == [("added", review), ("updated", review)]
