import logging
from pathlib import Path

from baremetal_secrets.bootstrap import bootstrap_secrets
from baremetal_secrets.config.models import ProvisioningConfig
from baremetal_secrets.logging.log import init_logging
from baremetal_secrets.models import DEFAULT_SECRET_KINDS, EnsureResult
from baremetal_secrets.store import InMemorySecretStore, KubernetesSecretStore


def test_bootstrap_with_given_store():
    store = InMemorySecretStore()
    cfg = ProvisioningConfig(namespace="metal3")

    results = bootstrap_secrets(cfg, store=store)

    assert list(results) == [k.name for k in DEFAULT_SECRET_KINDS]
    assert set(results.values()) == {EnsureResult.CREATED}
    assert {r.namespace for r in store.records()} == {"metal3"}


def test_bootstrap_builds_kubernetes_store_from_config(monkeypatch):
    store = InMemorySecretStore()
    seen = {}

    def fake_from_kubeconfig(**kw):
        seen.update(kw)
        return store

    monkeypatch.setattr(KubernetesSecretStore, "from_kubeconfig", fake_from_kubeconfig)

    cfg = ProvisioningConfig(namespace="metal3", kubeconfig="/tmp/kc", kube_context="mgmt")
    bootstrap_secrets(cfg)

    assert seen == {"kubeconfig": "/tmp/kc", "kube_context": "mgmt", "in_cluster": False}
    assert len(store.records()) == 3


def test_bootstrap_never_logs_passwords(caplog, monkeypatch):
    store = InMemorySecretStore()
    logger = logging.getLogger("baremetal_secrets")
    monkeypatch.setattr(logger, "propagate", True)
    with caplog.at_level(logging.DEBUG, logger="baremetal_secrets"):
        bootstrap_secrets(ProvisioningConfig(namespace="metal3"), store=store)

    text = caplog.text
    for r in store.records():
        assert r.string_data["password"] not in text


def test_init_logging_writes_run_log(tmp_path: Path):
    logger, run_id, log_path = init_logging(base_dir=tmp_path, name="bms-test")
    logger.info("hello")
    for h in logger.handlers:
        h.flush()

    assert log_path.parent == tmp_path
    assert run_id in log_path.name
    content = log_path.read_text()
    assert "run_id=" + run_id in content
    assert "| INFO    | hello" in content

    # re-initialising replaces handlers instead of stacking them
    logger2, _, _ = init_logging(base_dir=tmp_path, name="bms-test", verbose=True)
    assert logger2 is logger
    assert len(logger.handlers) == 2
    assert logger.handlers[1].level == logging.DEBUG
