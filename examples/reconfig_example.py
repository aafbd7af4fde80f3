from pathlib import Path

from jenkins_reconfig import KeyMapper, build_nested, load_flat_config


def main() -> None:
    entries = load_flat_config(Path(__file__).with_name("jenkins_config.json"))
    print(build_nested(entries))
    print(build_nested(entries, KeyMapper(sep="_test_")))


if __name__ == "__main__":
    main()
