from pathlib import Path

import hydra
from omegaconf import DictConfig, OmegaConf

from rendercache.host.compiler import BuildHost
from rendercache.host.report import cycle_report


@hydra.main(version_base=None, config_path="config", config_name="default")
def main(config: DictConfig) -> None:
    print("Full config:")
    print(OmegaConf.to_yaml(config))
    print()

    host = BuildHost.from_config(config)
    for cycle in range(config.build.cycles):
        stats = host.run()
        print("\n".join(cycle_report(host, cycle, stats)))

    if stats_path := config.build.get("stats_path"):
        host.save_stats(Path(stats_path))


if __name__ == '__main__':
    main()
