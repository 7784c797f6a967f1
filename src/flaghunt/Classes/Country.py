from dataclasses import dataclass

FLAG_IMAGE_URL = "https://flagcdn.com/w320/{}.png"

@dataclass(frozen=True)
class Country:
    code: str
    name: str

    @property
    def flag_url(self) -> str:
        return FLAG_IMAGE_URL.format(self.code)

    def __str__(self) -> str:
        return f"<{self.name} ({self.code})>"
