import importlib


def test_policy_defaults(monkeypatch):
    for name in ("SHARESPLIT_STRICT_HEADER", "SHARESPLIT_ENFORCE_QUORUM", "SHARESPLIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    from sharesplit.policy import load_policy

    policy = load_policy()
    assert policy.strict_header is True
    assert policy.enforce_quorum is True
    assert policy.log_level == "WARNING"


def test_policy_env_overrides(monkeypatch):
    monkeypatch.setenv("SHARESPLIT_STRICT_HEADER", "off")
    monkeypatch.setenv("SHARESPLIT_ENFORCE_QUORUM", "0")
    monkeypatch.setenv("SHARESPLIT_LOG_LEVEL", "debug")

    policy_module = importlib.import_module("sharesplit.policy")
    reloaded = importlib.reload(policy_module)

    try:
        policy = reloaded.policy
        assert policy.strict_header is False
        assert policy.enforce_quorum is False
        assert policy.log_level == "DEBUG"
    finally:
        monkeypatch.delenv("SHARESPLIT_STRICT_HEADER", raising=False)
        monkeypatch.delenv("SHARESPLIT_ENFORCE_QUORUM", raising=False)
        monkeypatch.delenv("SHARESPLIT_LOG_LEVEL", raising=False)
        importlib.reload(policy_module)


def test_unparseable_values_fall_back(monkeypatch):
    monkeypatch.setenv("SHARESPLIT_STRICT_HEADER", "maybe")
    monkeypatch.setenv("SHARESPLIT_LOG_LEVEL", "   ")
    from sharesplit.policy import load_policy

    policy = load_policy()
    assert policy.strict_header is True
    assert policy.log_level == "WARNING"


def test_codec_follows_policy(monkeypatch):
    import sharesplit.codec as codec
    from sharesplit.policy import SharingPolicy

    monkeypatch.setattr(codec, "policy", SharingPolicy(strict_header=False))
    assert codec.decode_share_line("0103BBFE").x == 1
