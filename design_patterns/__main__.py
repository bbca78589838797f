"""
Run pattern demonstrations.

    python -m design_patterns            # every demo, in catalogue order
    python -m design_patterns state proxy
"""

import sys
from typing import Callable, Iterable, List, Optional, Tuple

from design_patterns.behavioral import (
    chain_of_responsibility,
    command,
    interpreter,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template_method,
    visitor,
)
from design_patterns.creational import (
    abstract_factory,
    builder,
    factory_method,
    prototype,
    simple_factory,
    singleton,
)
from design_patterns.structural import proxy

PATTERN_DEMOS: List[Tuple[str, Callable[[], None]]] = [
    # creational
    ("builder", builder.main),
    ("simple_factory", simple_factory.main),
    ("abstract_factory", abstract_factory.main),
    ("factory_method", factory_method.main),
    ("singleton", singleton.main),
    ("prototype", prototype.main),
    # behavioral
    ("command", command.main),
    ("state", state.main),
    ("observer", observer.main),
    ("chain_of_responsibility", chain_of_responsibility.main),
    ("strategy", strategy.main),
    ("memento", memento.main),
    ("mediator", mediator.main),
    ("visitor", visitor.main),
    ("iterator", iterator.main),
    ("interpreter", interpreter.main),
    ("template_method", template_method.main),
    # structural
    ("proxy", proxy.main),
]


def run(names: Optional[Iterable[str]] = None) -> List[str]:
    """Run the named demos (all when names is empty), returns what ran"""
    demos = dict(PATTERN_DEMOS)
    selected = list(names) if names is not None else []
    if not selected:
        selected = [name for name, _ in PATTERN_DEMOS]

    unknown = [name for name in selected if name not in demos]
    if unknown:
        raise ValueError(f"Unknown pattern demo(s): {', '.join(unknown)}. "
                         f"Available: {', '.join(demos)}")

    for name in selected:
        demos[name]()
        print()
    return selected


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        run(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
