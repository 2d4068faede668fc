"""Configuration for test discovery."""

from pydantic import BaseModel, ConfigDict


class HarnessConfig(BaseModel):
    """Naming conventions used to recognise test files under a root."""

    model_config = ConfigDict(frozen=True)

    test_extension: str = ".js"
    # Files carrying this marker are loaded by other tests, never run directly
    fixture_marker: str = "_FIXTURE"

    def is_test_file(self, name: str) -> bool:
        """Check whether a file name denotes a standalone test."""
        return name.endswith(self.test_extension) and self.fixture_marker not in name
