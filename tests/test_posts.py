"""Tests for PostService."""

import pytest
import requests

from snoo.errors import InvalidArgumentError, InvalidOptionsError, SubmissionError
from snoo.services.posts import PostService, SubmitSelfOptions, SubmitURLOptions, Submitted

SUBMITTED_ENVELOPE = {"json": {"errors": [], "data": {"id": "x", "name": "t3_x", "url": "u"}}}


class TestSubmit:
    """Tests for self and link submissions."""

    def test_submit_self(self, client):
        client.post_form.return_value = SUBMITTED_ENVELOPE
        opts = SubmitSelfOptions(subreddit="test", title="hi", text="body")

        submitted = PostService(client).submit_self(opts)

        client.post_form.assert_called_once_with("api/submit", {
            "sr": "test",
            "title": "hi",
            "text": "body",
            "kind": "self",
            "api_type": "json",
        })
        assert submitted == Submitted(id="x", full_id="t3_x", url="u")

    def test_submit_url(self, client):
        client.post_form.return_value = SUBMITTED_ENVELOPE
        opts = SubmitURLOptions(
            subreddit="test",
            title="a link",
            url="https://example.com",
            flair_id="abc-123",
            send_replies=False,
            resubmit=True,
            nsfw=True,
        )

        submitted = PostService(client).submit_url(opts)

        client.post_form.assert_called_once_with("api/submit", {
            "sr": "test",
            "title": "a link",
            "url": "https://example.com",
            "flair_id": "abc-123",
            "sendreplies": "false",
            "resubmit": "true",
            "nsfw": "true",
            "kind": "link",
            "api_type": "json",
        })
        assert submitted.full_id == "t3_x"

    def test_submit_reports_api_errors(self, client):
        client.post_form.return_value = {
            "json": {"errors": [["SUBREDDIT_NOEXIST", "that subreddit doesn't exist", "sr"]]}
        }

        with pytest.raises(SubmissionError) as exc_info:
            PostService(client).submit_self(SubmitSelfOptions(subreddit="nope", title="hi"))

        assert exc_info.value.errors == [
            ("SUBREDDIT_NOEXIST", "that subreddit doesn't exist", "sr")
        ]
        assert "SUBREDDIT_NOEXIST" in str(exc_info.value)

    def test_submit_without_data_returns_none(self, client):
        client.post_form.return_value = {"json": {"errors": []}}

        assert PostService(client).submit_self(SubmitSelfOptions(title="hi")) is None

    def test_submit_with_empty_body_returns_none(self, client):
        client.post_form.return_value = None

        assert PostService(client).submit_url(SubmitURLOptions(title="hi")) is None

    def test_submit_rejects_wrong_options_class(self, client):
        with pytest.raises(InvalidOptionsError):
            PostService(client).submit_self(SubmitURLOptions(title="hi"))
        with pytest.raises(InvalidOptionsError):
            PostService(client).submit_url({"title": "hi"})

        client.post_form.assert_not_called()

    def test_submit_rejects_bad_option_values(self, client):
        with pytest.raises(InvalidOptionsError):
            PostService(client).submit_self(SubmitSelfOptions(title=123))
        with pytest.raises(InvalidOptionsError):
            PostService(client).submit_self(SubmitSelfOptions(nsfw="yes"))
        with pytest.raises(InvalidOptionsError):
            PostService(client).submit_url(SubmitURLOptions(send_replies=1))

        client.post_form.assert_not_called()

    def test_transport_errors_propagate(self, client):
        client.post_form.side_effect = requests.ConnectionError("boom")

        with pytest.raises(requests.ConnectionError):
            PostService(client).submit_self(SubmitSelfOptions(title="hi"))


class TestOptionEncoding:
    """Tests for form encoding of submit options."""

    def test_empty_options_encode_to_nothing(self):
        assert SubmitSelfOptions().to_form() == {}
        assert SubmitURLOptions().to_form() == {}

    def test_send_replies_is_tri_state(self):
        assert "sendreplies" not in SubmitSelfOptions().to_form()
        assert SubmitSelfOptions(send_replies=True).to_form() == {"sendreplies": "true"}
        assert SubmitSelfOptions(send_replies=False).to_form() == {"sendreplies": "false"}

    def test_flags_only_sent_when_set(self):
        form = SubmitSelfOptions(nsfw=True, spoiler=False, flair_text="Meta").to_form()

        assert form == {"flair_text": "Meta", "nsfw": "true"}


class TestToggles:
    """Tests for single-id flag endpoints."""

    @pytest.mark.parametrize(
        "method, path, form",
        [
            ("enable_replies", "api/sendreplies", {"id": "t1_abc", "state": "true"}),
            ("disable_replies", "api/sendreplies", {"id": "t1_abc", "state": "false"}),
            ("mark_nsfw", "api/marknsfw", {"id": "t1_abc"}),
            ("unmark_nsfw", "api/unmarknsfw", {"id": "t1_abc"}),
            ("spoiler", "api/spoiler", {"id": "t1_abc"}),
            ("unspoiler", "api/unspoiler", {"id": "t1_abc"}),
        ],
    )
    def test_posts_id_form(self, client, method, path, form):
        result = getattr(PostService(client), method)("t1_abc")

        assert result is None
        client.post_form.assert_called_once_with(path, form)

    def test_mark_nsfw(self, client):
        PostService(client).mark_nsfw("t3_x")

        client.post_form.assert_called_once_with("api/marknsfw", {"id": "t3_x"})

    def test_toggle_errors_propagate(self, client):
        client.post_form.side_effect = requests.HTTPError("403 Client Error: Forbidden")

        with pytest.raises(requests.HTTPError, match="403"):
            PostService(client).spoiler("t3_x")


class TestHide:
    """Tests for hide and unhide."""

    def test_hide_joins_ids(self, client):
        PostService(client).hide("t3_a", "t3_b")

        client.post_form.assert_called_once_with("api/hide", {"id": "t3_a,t3_b"})

    def test_unhide_joins_ids(self, client):
        PostService(client).unhide("t3_a", "t3_b", "t3_c")

        client.post_form.assert_called_once_with("api/unhide", {"id": "t3_a,t3_b,t3_c"})

    @pytest.mark.parametrize("method", ["hide", "unhide"])
    def test_requires_an_id(self, client, method):
        with pytest.raises(InvalidArgumentError, match="at least 1 id"):
            getattr(PostService(client), method)()

        client.post_form.assert_not_called()
