"""Shared test fixtures and configuration."""

import tempfile
import threading
from pathlib import Path

import pytest

from convit.config import ConvitConfig
from convit.llm.base import BaseLLMProvider
from convit.llm.exceptions import EmptyCompletionError


class FakeProvider(BaseLLMProvider):
    """Provider returning canned responses and recording every prompt."""

    api_key_env_var = "FAKE_API_KEY"
    provider_name = "Fake"

    def __init__(self, responses=None, error=None, block=False, allow_empty=False):
        # Skip the environment lookup of the real providers
        self.model = "fake-model"
        self.allow_empty = allow_empty
        self.api_key = "fake-key"
        self.responses = list(responses or ["feat: add feature"])
        self.error = error
        self.block = block
        self.release = threading.Event()
        self.calls = []

    def create_message(self, prompt, timeout):
        self.calls.append(prompt)
        if self.block:
            self.release.wait(5)
        if self.error is not None:
            raise self.error
        # Repeat the last response once the list is exhausted
        index = min(len(self.calls), len(self.responses)) - 1
        text = self.responses[index]
        if not text and not self.allow_empty:
            raise EmptyCompletionError("empty")
        return text


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    path = temp_dir / ".convit"
    mocker.patch("convit.global_config._CONFIG_DIR", path)
    return path


@pytest.fixture
def config():
    """Default configuration."""
    return ConvitConfig()


@pytest.fixture
def fake_provider():
    """A provider answering with a fixed message."""
    return FakeProvider()


@pytest.fixture
def no_api_keys(monkeypatch):
    """Remove provider API keys from the environment."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)


@pytest.fixture
def main_go_chunk():
    """Diff block of a Go source file."""
    return """diff --git a/main.go b/main.go
index 1234567..89abcde 100644
--- a/main.go
+++ b/main.go
@@ -1,5 +1,9 @@
 package main

+import "fmt"
+
 func main() {
+	fmt.Println("hello")
 }
"""


@pytest.fixture
def go_sum_chunk():
    """Diff block of a Go checksum file."""
    return """diff --git a/go.sum b/go.sum
index 1111111..2222222 100644
--- a/go.sum
+++ b/go.sum
@@ -1,2 +1,3 @@
 github.com/pkg/errors v0.9.1 h1:FEBLx1zS214owpjy7qsBeixbURkuhQAwrK5UwLGTwt4=
+github.com/pkg/errors v0.9.1/go.mod h1:bwawxfHBFNV+L2hUp1rHADufV3IMtnDRdf1r5NINEl0=
"""


@pytest.fixture
def sample_diff(main_go_chunk, go_sum_chunk):
    """Staged diff with a source file and a lock file."""
    return main_go_chunk + go_sum_chunk


@pytest.fixture
def multi_file_diff():
    """Staged diff touching several source and lock files."""
    files = [
        "src/app.py",
        "package-lock.json",
        "README.md",
        "yarn.lock",
        "src/util/helpers.py",
        "Cargo.lock",
        "docs/guide.md",
    ]
    blocks = []
    for name in files:
        blocks.append(
            f"diff --git a/{name} b/{name}\n"
            f"index 0000000..1111111 100644\n"
            f"--- a/{name}\n"
            f"+++ b/{name}\n"
            f"@@ -1 +1 @@\n"
            f"-old {name}\n"
            f"+new {name}\n"
        )
    return "".join(blocks)


@pytest.fixture
def make_provider():
    """Factory for providers with custom responses or failures."""
    return FakeProvider
