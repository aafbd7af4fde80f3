import shutil
import tempfile
from pathlib import Path

from jenkins_reconfig import decofy


def main() -> None:
    with tempfile.TemporaryDirectory() as workdir:
        config = Path(workdir) / "config.json"
        _ = shutil.copy(Path(__file__).with_name("jenkins_config.json"), config)
        _ = decofy.main([str(config)])
        print(config.read_text())


if __name__ == "__main__":
    main()
