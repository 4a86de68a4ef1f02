"""Tests for the configuration verification contract."""

import logging

import pytest

from extension_docs.core import FlowRegistryClient
from extension_docs.models import (
    ConfigVerificationResult,
    Outcome,
    VerifiableComponent,
    VerificationNotAllowed,
    run_verification,
)


class VerifiableRegistryClient(FlowRegistryClient, VerifiableComponent):
    """Registry client that checks its URL property."""

    def __init__(self):
        self.calls = []

    def verify(self, context, verification_logger, variables):
        self.calls.append((dict(context), verification_logger, variables))
        url = context.get("Registry URL", "")
        results = [
            ConfigVerificationResult(
                verification_step_name="Check URL scheme",
                outcome=Outcome.SUCCESSFUL if url.startswith("https://") else Outcome.FAILED,
                explanation=f"URL is {url}",
            ),
            ConfigVerificationResult(
                verification_step_name="Connect",
                outcome=Outcome.SKIPPED,
            ),
        ]
        return results


class TestRunVerification:
    """Test run_verification preconditions and results."""

    def test_results_returned_in_order(self):
        """Test results come back in component order."""
        client = VerifiableRegistryClient()

        results = run_verification(
            client,
            {"Registry URL": "https://registry.example.com"},
            {"env": "test"},
            valid=True,
            enabled=False,
        )

        assert [r.verification_step_name for r in results] == ["Check URL scheme", "Connect"]
        assert [r.outcome for r in results] == [Outcome.SUCCESSFUL, Outcome.SKIPPED]

        context, verification_logger, variables = client.calls[0]
        assert isinstance(verification_logger, logging.Logger)
        assert variables == {"env": "test"}

    def test_variables_default_empty(self):
        """Test omitted variables are passed as an empty dict."""
        client = VerifiableRegistryClient()

        run_verification(client, {}, valid=True, enabled=False)

        assert client.calls[0][2] == {}

    def test_invalid_configuration_rejected(self):
        """Test verification requires a valid configuration."""
        client = VerifiableRegistryClient()

        with pytest.raises(VerificationNotAllowed, match="validation"):
            run_verification(client, {}, valid=False, enabled=False)
        assert client.calls == []

    def test_enabled_component_rejected(self):
        """Test verification requires a disabled component."""
        client = VerifiableRegistryClient()

        with pytest.raises(VerificationNotAllowed, match="disabled"):
            run_verification(client, {}, valid=True, enabled=True)
        assert client.calls == []

    def test_failed_step_logged(self, caplog):
        """Test failed steps are logged as warnings."""
        client = VerifiableRegistryClient()

        with caplog.at_level(logging.WARNING, logger="extension_docs.models.verification"):
            results = run_verification(
                client, {"Registry URL": "http://insecure"}, valid=True, enabled=False
            )

        assert results[0].outcome == Outcome.FAILED
        assert "Check URL scheme" in caplog.text
        assert "failed" in caplog.text


class TestVerifiableComponent:
    """Test the abstract contract."""

    def test_verify_is_abstract(self):
        """Test components must implement verify."""
        with pytest.raises(TypeError):
            VerifiableComponent()
