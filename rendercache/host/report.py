from .compiler import BuildHost
from .stats import BuildStats


def cycle_report(host: BuildHost, cycle: int, stats: BuildStats) -> list[str]:
    lines = [
        f"cycle {cycle}: hash={stats.hash} built={len(stats.built_modules())} errors={len(stats.all_errors())}",
    ]
    for plugin in host.plugins:
        lines.append(f"  {plugin.name}: evaluations={plugin.evaluation_count} hash={plugin.child_compiler_hash}")
    return lines
