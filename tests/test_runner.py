from urllib.parse import parse_qs, urlsplit

import pytest

from conftest import FakeResponse, envelope, url_for
from instasheets.actions import runner as R
from instasheets.exceptions import FlattenDepthError, PaginationError, TransportError
from instasheets.tools.auth.adapters.in_memory_store import InMemoryPropertyStore
from instasheets.tools.sheet.interface import Cursor

P2 = url_for("users/self/media/recent") + "&max_id=2"
P3 = url_for("users/self/media/recent") + "&max_id=3"


def test_profile_written_at_cursor(make_runner, session, sheet):
    session.routes[url_for("users/self")] = envelope(
        {"id": "1574083", "username": "snoopdogg", "counts": {"media": 1320, "follows": 420}}
    )
    runner, ui = make_runner()
    result = runner.run("users_self", Cursor(3, 2))
    assert result.status == R.SUCCESS
    assert result.pages == 1
    assert result.rows_written == 5
    assert result.cursor == Cursor(8, 2)
    assert sheet.block(Cursor(3, 2), result.cursor) == [
        ["id", "1574083"],
        ["username", "snoopdogg"],
        ["counts:", ""],
        ["media", "1320"],
        ["follows", "420"],
    ]
    assert ui.alerts == []


def test_pages_written_one_below_another(make_runner, session, sheet):
    session.routes.update({
        url_for("users/self/media/recent"): envelope([{"id": "a"}], next_url=P2),
        P2: envelope([], next_url=P3),
        P3: envelope([{"id": "b"}, {"id": "c"}]),
    })
    runner, _ = make_runner([""])
    result = runner.run("users_self_media_recent", Cursor(1, 1))
    assert result.pages == 3
    assert result.rows_written == 3
    assert sheet.block(Cursor(1, 1), result.cursor) == [["id", "a"], ["id", "b"], ["id", "c"]]


def test_count_and_query_reach_the_url(make_runner, session):
    url = url_for("users/search", "q=Steven%20Syrek&count=5&")
    session.routes[url] = envelope([{"username": "ssyrek"}])
    runner, _ = make_runner(["Steven Syrek", "5"])
    result = runner.run("users_search", Cursor(1, 1))
    assert result.status == R.SUCCESS
    assert session.get_calls == [url]


def test_cancelled_prompt_makes_no_request_and_no_dialog(make_runner, session, sheet):
    runner, ui = make_runner([None])
    result = runner.run("users_user_id", Cursor(1, 1))
    assert result.status == R.CANCELLED
    assert session.get_calls == []
    assert ui.alerts == []
    assert sheet.cell(1, 1) == ""


def test_api_error_mid_chain_writes_nothing(make_runner, session, sheet):
    session.routes.update({
        url_for("users/self/follows"): envelope([{"id": "1"}], next_url=P2),
        P2: envelope(None, code=400, error_type="APIRateLimitError", error_message="slow down"),
    })
    runner, ui = make_runner()
    result = runner.run("users_self_follows", Cursor(1, 1))
    assert result.status == R.ERROR
    assert result.rows_written == 0
    assert result.cursor == Cursor(1, 1)
    assert ui.alerts == [("Instagram error 400", "APIRateLimitError: slow down")]
    assert sheet.cell(1, 1) == ""


def test_missing_token_alerts_and_skips_network(make_runner, session):
    runner, ui = make_runner(store=InMemoryPropertyStore())
    result = runner.run("users_self", Cursor(1, 1))
    assert result.status == R.ERROR
    assert session.get_calls == []
    assert ui.alerts[0][0] == "Instagram error 401"
    assert ui.alerts[0][1].startswith("AuthMissing:")


def test_empty_result_leaves_cursor(make_runner, session):
    session.routes[url_for("users/self/requested-by")] = envelope([])
    runner, _ = make_runner()
    result = runner.run("users_self_requested_by", Cursor(4, 1))
    assert result.status == R.NO_RESULTS
    assert result.cursor == Cursor(4, 1)


def test_geo_search_param_order(make_runner, session):
    url = url_for("locations/search", "distance=750&lat=48.85&lng=2.35&")
    session.routes[url] = envelope([{"id": "1", "name": "Louvre"}])
    runner, _ = make_runner(["48.85", "2.35", "1000"])
    result = runner.run("locations_search", Cursor(1, 1))
    assert result.rows_written == 2
    assert session.get_calls == [url]


def test_sheet_grows_when_rows_run_out(make_runner, session, sheet):
    session.routes[url_for("users/self/follows")] = envelope([{"id": str(i)} for i in range(10)])
    runner, _ = make_runner()
    result = runner.run("users_self_follows", Cursor(15, 1))
    assert sheet.max_rows == 24
    assert result.cursor == Cursor(25, 1)
    assert sheet.cell(24, 2) == "9"


def test_authorize_and_deauthorize(make_runner, token_store):
    runner, ui = make_runner()
    runner.authorize()
    assert ui.alerts == [("This app is already authorized.", None)]
    runner.deauthorize()
    assert ui.alerts[-1] == ("Access deauthorized.", None)
    runner.authorize()
    assert len(ui.links) == 1
    assert "response_type=code" in ui.links[0]


def _nested(levels):
    node = {"id": "deep"}
    for _ in range(levels):
        node = {"child": node}
    return node


@pytest.mark.parametrize("second_page,error", [
    (envelope([_nested(300)]), FlattenDepthError),
    (FakeResponse("<html>502 Bad Gateway</html>", status_code=502), TransportError),
    (envelope([{"id": "2"}], next_url=url_for("users/self/follows")), PaginationError),
])
def test_fault_on_later_page_writes_nothing(make_runner, session, sheet, second_page, error):
    session.routes.update({
        url_for("users/self/follows"): envelope([{"id": "1"}], next_url=P2),
        P2: second_page,
    })
    runner, ui = make_runner()
    with pytest.raises(error):
        runner.run("users_self_follows", Cursor(1, 1))
    assert sheet.block(Cursor(1, 1), Cursor(3, 1)) == [["", ""], ["", ""]]
    assert ui.alerts == []


def test_complete_authorization_checks_state(make_runner, session):
    session.token_body = {"access_token": "fresh.token"}
    runner, ui = make_runner(store=InMemoryPropertyStore())
    runner.authorize()
    state = parse_qs(urlsplit(ui.links[0]).query)["state"][0]
    assert runner.complete_authorization("the-code", "not-" + state) is False
    assert ui.alerts[-1] == ("Denied.", "Authorization was not granted.")
    assert session.post_calls == []
    assert runner.complete_authorization("the-code", state) is True
    assert ui.alerts[-1] == ("Success!", "Authorization complete.")
    assert runner.auth.get_access_token() == "fresh.token"
