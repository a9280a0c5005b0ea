from insults.replies import build_retort_reply


def _reply(registry, content, message_id=1234) -> str:
    return build_retort_reply(message_content=content, message_id=message_id, registry=registry)


def test_known_insult_gets_its_retort(registry) -> None:
    assert _reply(registry, "Have you stopped wearing diapers yet?") == "Why, did you want to borrow one?"
    assert _reply(registry, "  Hey, look over there!  ") == "Yeah, yeah I know: it's a three headed monkey."


def test_insult_me_returns_a_known_insult(registry) -> None:
    reply = _reply(registry, "Go on, INSULT me.")
    assert reply in registry.insults()


def test_insult_me_is_deterministic_per_message(registry) -> None:
    a = _reply(registry, "insult me", message_id=42)
    b = _reply(registry, "insult me", message_id=42)
    assert a == b


def test_insult_needs_whole_words(registry) -> None:
    assert _reply(registry, "insulting meme") == ""


def test_en_garde_with_known_insult(registry) -> None:
    assert _reply(registry, "En garde: Hey, look over there!") == "Yeah, yeah I know: it's a three headed monkey."


def test_en_garde_with_unknown_insult_fails_to_retort(registry) -> None:
    reply = _reply(registry, "en garde! You're lazy!")
    assert reply in registry.failed_retorts


def test_bare_en_garde_is_a_known_insult(registry) -> None:
    assert _reply(registry, "En garde!") == "Sword Master answer to en garde."


def test_no_reply_for_everything_else(registry) -> None:
    assert _reply(registry, "") == ""
    assert _reply(registry, "   ") == ""
    assert _reply(registry, "nice weather today") == ""
    assert _reply(registry, "en garde") == ""
