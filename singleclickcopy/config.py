from dataclasses import dataclass
from pathlib import Path
import os


@dataclass
class AppConfig:
    app_name: str = "Single Click Copy"
    list_file_name: str = "SingleClickCopyList.txt"
    log_level: str = "INFO"
    log_to_file: bool = True
    patreon_url: str = "https://www.patreon.com/publicdomain"
    source_url: str = "https://github.com/publicdomain"
    thread_url: str = "https://www.reddit.com/r/software/comments/ewoi4z/copypaste_text_with_a_single_click_without/"

    @property
    def app_data_path(self) -> Path:
        # On Windows use APPDATA; otherwise fallback to home/.config
        folder = self.app_name.replace(" ", "")
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / folder
        return Path.home() / ".config" / folder

    @property
    def log_file(self) -> Path:
        return self.app_data_path / "singleclickcopy.log"

    def default_list_path(self, cwd=None) -> Path:
        """The implicit load/save file, relative to the working directory."""
        base = Path(cwd) if cwd is not None else Path.cwd()
        return base / self.list_file_name
