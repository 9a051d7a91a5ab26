from recruit_console.services.notifications import Notifier


def test_notifier_records_and_forwards():
    received = []
    notifier = Notifier()
    notifier.subscribe(received.append)

    notifier.notify("Saved", "All good")
    notifier.error("Oops", "Something broke")

    assert [n.title for n in notifier.history] == ["Saved", "Oops"]
    assert received == notifier.history
    assert notifier.last.is_error is True

    notifier.unsubscribe(received.append)
    notifier.notify("Quiet", "Nobody listening")
    assert len(received) == 2


def test_failing_subscriber_does_not_block_others():
    received = []
    notifier = Notifier()

    def broken(notification):
        raise RuntimeError("render failed")

    notifier.subscribe(broken)
    notifier.subscribe(received.append)
    notifier.notify("Hello", "World")

    assert [n.title for n in received] == ["Hello"]
