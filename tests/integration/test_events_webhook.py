import json

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from slack_sigverify import (
    AppMentionEvent,
    BadSignatureError,
    ConfigurationError,
    EventsAPICallbackEvent,
    EventsAPIEvent,
    EventsAPIURLVerificationEvent,
    FixedClock,
    SignatureVerifier,
    StaleTimestampError,
    UnknownInnerEventError,
    UnmarshallingError,
    VerifierConfig,
    WebhookReceiver,
    verify_and_parse,
)
from slack_sigverify.events import default_events_api_registry
from slack_sigverify.webhook import security
from slack_sigverify.webhook.security import compute_signature

NOW = 1533878462
CLOCK = FixedClock(NOW)
SIGNING_SECRET = "1111111111111111111111111111111"
TIMESTAMP = str(NOW)

CALLBACK_BODY = json.dumps(
    {
        "token": "XXYYZZ",
        "team_id": "TXXXXXXXX",
        "api_app_id": "AXXXXXXXXX",
        "event": {
            "type": "app_mention",
            "event_ts": "1234567890.123456",
            "user": "UXXXXXXX1",
        },
        "type": "event_callback",
        "authed_users": ["UXXXXXXX1"],
        "event_id": "Ev08MFMKH6",
        "event_time": 1234567890,
    }
).encode("utf-8")
URL_VERIFICATION_BODY = b'{"token":"fake-token","challenge":"aljdsflaji3jj","type":"url_verification"}'


def test_callback_event_with_inner_dispatch():
    event = _verify(CALLBACK_BODY)

    assert event.type == "event_callback"
    assert isinstance(event.data, EventsAPICallbackEvent)
    assert event.inner_event is not None
    assert event.inner_event.type == "app_mention"
    assert isinstance(event.inner_event.data, AppMentionEvent)
    assert event.inner_event.data.user == "UXXXXXXX1"


def test_url_verification_event():
    event = _verify(URL_VERIFICATION_BODY)

    assert event.type == "url_verification"
    assert isinstance(event.data, EventsAPIURLVerificationEvent)
    assert event.data.challenge == "aljdsflaji3jj"
    assert event.inner_event is None


def test_bad_secret_is_rejected_with_empty_event():
    signature = compute_signature(SIGNING_SECRET, TIMESTAMP, URL_VERIFICATION_BODY)
    with pytest.raises(BadSignatureError) as exc_info:
        verify_and_parse(URL_VERIFICATION_BODY, "hoge", TIMESTAMP, signature, clock=CLOCK)

    assert exc_info.value.event == EventsAPIEvent()


def test_stale_timestamp_short_circuits_before_hmac(monkeypatch):
    def _fail(*_args, **_kwargs):
        raise AssertionError("signature must not be computed for stale requests")

    monkeypatch.setattr(security, "compute_signature", _fail)
    with pytest.raises(StaleTimestampError) as exc_info:
        verify_and_parse(URL_VERIFICATION_BODY, SIGNING_SECRET, "1533870000", "v0=whatever", clock=CLOCK)

    assert exc_info.value.event == EventsAPIEvent()


def test_unknown_inner_event_type():
    body = json.dumps(
        {
            "token": "XXYYZZ",
            "team_id": "TXXXXXXXX",
            "type": "event_callback",
            "event": {"type": "definitely_not_real"},
        }
    ).encode("utf-8")
    with pytest.raises(UnknownInnerEventError) as exc_info:
        _verify(body)

    assert exc_info.value.event_type == "definitely_not_real"
    assert exc_info.value.event.token == "XXYYZZ"
    assert exc_info.value.event.team_id == "TXXXXXXXX"


def test_malformed_json_is_unmarshalling_error():
    with pytest.raises(UnmarshallingError) as exc_info:
        _verify(b"{")

    assert exc_info.value.event.type == "unmarshalling_error"


def test_boundary_timestamps():
    for offset in (-300, 300):
        timestamp = str(NOW + offset)
        signature = compute_signature(SIGNING_SECRET, timestamp, URL_VERIFICATION_BODY)
        verify_and_parse(URL_VERIFICATION_BODY, SIGNING_SECRET, timestamp, signature, clock=CLOCK)
    for offset in (-301, 301):
        timestamp = str(NOW + offset)
        signature = compute_signature(SIGNING_SECRET, timestamp, URL_VERIFICATION_BODY)
        with pytest.raises(StaleTimestampError):
            verify_and_parse(URL_VERIFICATION_BODY, SIGNING_SECRET, timestamp, signature, clock=CLOCK)


def test_malformed_timestamp_fails_signature_unless_rejected_early():
    signature = compute_signature(SIGNING_SECRET, TIMESTAMP, URL_VERIFICATION_BODY)
    with pytest.raises(BadSignatureError):
        verify_and_parse(URL_VERIFICATION_BODY, SIGNING_SECRET, "soon", signature, clock=CLOCK)
    with pytest.raises(StaleTimestampError):
        verify_and_parse(
            URL_VERIFICATION_BODY,
            SIGNING_SECRET,
            "soon",
            signature,
            clock=CLOCK,
            reject_malformed_timestamp=True,
        )


def test_signature_is_checked_before_body_is_decoded():
    with pytest.raises(BadSignatureError):
        verify_and_parse(b"{", SIGNING_SECRET, TIMESTAMP, "v0=" + "0" * 64, clock=CLOCK)


def test_body_with_escaped_nul_is_verified_and_decoded():
    body = b'{"type":"url_verification","challenge":"a\\u0000b"}'
    event = _verify(body)

    assert event.data.challenge == "a\x00b"


def test_body_with_raw_nul_bytes_is_verified_byte_exactly():
    body = b'{"type":"url_verification","challenge":"c"}\x00'
    signature = compute_signature(SIGNING_SECRET, TIMESTAMP, body)

    # The signature over the NUL-terminated bytes passes; only decoding fails.
    with pytest.raises(UnmarshallingError):
        verify_and_parse(body, SIGNING_SECRET, TIMESTAMP, signature, clock=CLOCK)
    with pytest.raises(BadSignatureError):
        verify_and_parse(body.rstrip(b"\x00"), SIGNING_SECRET, TIMESTAMP, signature, clock=CLOCK)


def test_surrogate_headers_are_rejected_as_bad_signature():
    with pytest.raises(BadSignatureError):
        verify_and_parse(URL_VERIFICATION_BODY, SIGNING_SECRET, TIMESTAMP, "v0=\udcff", clock=CLOCK)
    with pytest.raises(BadSignatureError):
        verify_and_parse(URL_VERIFICATION_BODY, SIGNING_SECRET, "15338784\udcff", "v0=x", clock=CLOCK)


def test_missing_signature_header_still_checks_freshness_first():
    verifier = SignatureVerifier(VerifierConfig(signing_secret=SIGNING_SECRET), clock=CLOCK)

    with pytest.raises(StaleTimestampError):
        verifier.verify_request({"X-Slack-Request-Timestamp": "1533870000"}, CALLBACK_BODY)
    with pytest.raises(BadSignatureError):
        verifier.verify_request({"X-Slack-Request-Timestamp": TIMESTAMP}, CALLBACK_BODY)
    with pytest.raises(BadSignatureError):
        verifier.verify_request({}, CALLBACK_BODY)


def test_signature_verifier_reads_headers():
    verifier = SignatureVerifier(VerifierConfig(signing_secret=SIGNING_SECRET), clock=CLOCK)
    headers = {
        "X-Slack-Request-Timestamp": TIMESTAMP,
        "X-Slack-Signature": compute_signature(SIGNING_SECRET, TIMESTAMP, CALLBACK_BODY),
    }

    event = verifier.verify_request(headers, CALLBACK_BODY)
    assert event.inner_event.type == "app_mention"

    with pytest.raises(BadSignatureError):
        verifier.verify_request({"X-Slack-Request-Timestamp": TIMESTAMP}, CALLBACK_BODY)


def test_signature_verifier_without_rtm_registry():
    verifier = SignatureVerifier(
        VerifierConfig(signing_secret=SIGNING_SECRET, use_rtm_registry=False),
        clock=CLOCK,
    )
    body = json.dumps({"type": "event_callback", "event": {"type": "presence_change"}}).encode("utf-8")

    with pytest.raises(UnknownInnerEventError):
        verifier.verify_and_parse(body, TIMESTAMP, compute_signature(SIGNING_SECRET, TIMESTAMP, body))
    assert [registry.name for registry in verifier.registries] == ["events_api"]


def test_signature_verifier_requires_secret():
    with pytest.raises(ConfigurationError):
        SignatureVerifier(VerifierConfig(signing_secret=""))
    with pytest.raises(ValueError):
        VerifierConfig(signing_secret=SIGNING_SECRET, tolerance_seconds=-1)


def test_receiver_maps_outcomes_to_responses():
    handled: list[str] = []
    receiver = WebhookReceiver(
        SignatureVerifier(
            VerifierConfig(signing_secret=SIGNING_SECRET),
            clock=CLOCK,
            registries=[default_events_api_registry()],
        ),
        handler=lambda event: handled.append(event.inner_event.type),
    )

    response = receiver.handle(_headers(URL_VERIFICATION_BODY), URL_VERIFICATION_BODY)
    assert response.status_code == 200
    assert response.body == {"challenge": "aljdsflaji3jj"}

    response = receiver.handle(_headers(CALLBACK_BODY), CALLBACK_BODY)
    assert response.status_code == 200
    assert handled == ["app_mention"]

    response = receiver.handle(_headers(CALLBACK_BODY, secret="hoge"), CALLBACK_BODY)
    assert response.status_code == 401
    assert isinstance(response.error, BadSignatureError)
    assert "signature" not in json.dumps(response.body)

    stale = {"X-Slack-Request-Timestamp": "1533870000", "X-Slack-Signature": "v0=x"}
    assert receiver.handle(stale, CALLBACK_BODY).status_code == 401

    response = receiver.handle(_headers(b"{"), b"{")
    assert response.status_code == 400
    assert isinstance(response.error, UnmarshallingError)

    unknown = json.dumps({"type": "event_callback", "team_id": "T1", "event": {"type": "nope"}}).encode("utf-8")
    response = receiver.handle(_headers(unknown), unknown)
    assert response.status_code == 200
    assert isinstance(response.error, UnknownInnerEventError)
    assert handled == ["app_mention"]

    no_challenge = b'{"type":"url_verification"}'
    assert receiver.handle(_headers(no_challenge), no_challenge).status_code == 400


def test_receiver_logs_unknown_inner_event(caplog):
    receiver = WebhookReceiver(SignatureVerifier(VerifierConfig(signing_secret=SIGNING_SECRET), clock=CLOCK))
    body = json.dumps({"type": "event_callback", "team_id": "T1", "event": {"type": "nope"}}).encode("utf-8")

    with caplog.at_level("WARNING", logger="slack_sigverify.webhook.receiver"):
        receiver.handle(_headers(body), body)

    assert "unknown inner event type 'nope'" in caplog.text


@given(
    secret=st.binary(min_size=1, max_size=32),
    body=st.binary(max_size=128),
    offset=st.integers(min_value=-300, max_value=300),
)
def test_valid_signatures_are_never_rejected(secret, body, offset):
    timestamp = str(NOW + offset)
    signature = compute_signature(secret, timestamp, body)
    try:
        verify_and_parse(body, secret, timestamp, signature, clock=CLOCK)
    except (UnmarshallingError, UnknownInnerEventError):
        pass


@given(
    secret=st.binary(min_size=1, max_size=32),
    forged=st.text(max_size=80),
    body=st.binary(max_size=128),
)
def test_forged_signatures_are_always_rejected(secret, forged, body):
    assume(forged != compute_signature(secret, TIMESTAMP, body))
    with pytest.raises(BadSignatureError):
        verify_and_parse(body, secret, TIMESTAMP, forged, clock=CLOCK)


def test_decoded_bytes_equal_signed_bytes():
    body = json.dumps(
        {"type": "event_callback", "event": {"type": "app_mention", "text": "café  ☃"}},
        ensure_ascii=False,
    ).encode("utf-8")
    event = _verify(body)

    inner = event.data.inner_raw
    assert inner in body
    assert event.inner_event.data.text == "café  ☃"


def _verify(body: bytes) -> EventsAPIEvent:
    signature = compute_signature(SIGNING_SECRET, TIMESTAMP, body)
    return verify_and_parse(body, SIGNING_SECRET, TIMESTAMP, signature, clock=CLOCK)


def _headers(body: bytes, *, secret: str = SIGNING_SECRET) -> dict[str, str]:
    return {
        "X-Slack-Request-Timestamp": TIMESTAMP,
        "X-Slack-Signature": compute_signature(secret, TIMESTAMP, body),
    }
