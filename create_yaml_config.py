# Writes config.yaml for the host this script runs on
from pathlib import Path
from typing import Dict
import platform
import yaml

from utils.config import DEFAULT_LOG_LEVEL

# === Cấu hình ===
OUTPUT_YAML = Path(__file__).resolve().parent / "config.yaml"


def build_config(system_name: str, log_level: str = DEFAULT_LOG_LEVEL) -> Dict[str, str]:
    # platform.system() reports "Darwin" on macOS; only Windows is matched exactly
    os_type = "Windows" if system_name == "Windows" else "Mac"
    return {
        "os_type": os_type,
        "log_level": log_level,
    }


def main(output: Path = OUTPUT_YAML) -> Dict[str, str]:
    data = build_config(platform.system())

    with Path(output).open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)

    print(f"Wrote '{output}' with os_type={data['os_type']}.")
    return data


if __name__ == "__main__":
    main()
