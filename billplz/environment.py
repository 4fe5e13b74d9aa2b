from enum import Enum


class Environment(str, Enum):
    PRODUCTION = "production"
    STAGING = "staging"

    @property
    def base_url(self) -> str:
        if self is Environment.PRODUCTION:
            return "https://www.billplz.com"
        return "https://www.billplz-sandbox.com"

    @classmethod
    def from_name(cls, name: str) -> "Environment":
        # anything that is not explicitly production talks to the sandbox
        if (name or "").strip().lower() == "production":
            return cls.PRODUCTION
        return cls.STAGING
