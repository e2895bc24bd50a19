"""Tests for problemboard.routing.history — push-state stack."""

from problemboard.routing.history import History


class TestHistory:
    def test_initial(self) -> None:
        h = History()
        assert h.current == "/"
        assert len(h) == 1
        assert h.can_go_back is False
        assert h.can_go_forward is False

    def test_push(self) -> None:
        h = History()
        h.push("/create")
        assert h.current == "/create"
        assert h.entries == ("/", "/create")
        assert h.can_go_back is True

    def test_back_forward(self) -> None:
        h = History()
        h.push("/a/1")
        h.push("/a/2")
        assert h.back() == "/a/1"
        assert h.can_go_forward is True
        assert h.forward() == "/a/2"

    def test_back_at_start_stays(self) -> None:
        h = History()
        assert h.back() == "/"

    def test_forward_at_end_stays(self) -> None:
        h = History()
        h.push("/create")
        assert h.forward() == "/create"

    def test_push_drops_forward_entries(self) -> None:
        h = History()
        h.push("/a/1")
        h.push("/a/2")
        h.back()
        h.push("/create")
        assert h.entries == ("/", "/a/1", "/create")
        assert h.can_go_forward is False

    def test_replace(self) -> None:
        h = History()
        h.push("/a/1")
        h.replace("/a/2")
        assert h.entries == ("/", "/a/2")

    def test_peek(self) -> None:
        h = History()
        h.push("/a/1")
        assert h.peek(-1) == "/"
        assert h.peek(1) == "/a/1"
        assert h.peek(-5) == "/"
        assert h.current == "/a/1"

    def test_repr(self) -> None:
        assert repr(History()) == "History(current='/', entries=1)"
