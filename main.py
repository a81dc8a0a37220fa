import sys
from typing import Optional, Mapping

from utils import load_config, configure_logging, run_scenarios


def main(env: Optional[Mapping[str, str]] = None) -> int:
    config = load_config(env)
    configure_logging(config.log_level)

    report = run_scenarios(config.names, config.scenarios)
    for result in report.results:
        print(result.message())

    return 0 if report.consistent else 1


if __name__ == "__main__":
    sys.exit(main())
