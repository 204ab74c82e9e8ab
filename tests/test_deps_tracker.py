from rendercache.core.mytyping import ChildCompilationResult
from rendercache.tracking.deps import DependencyTracker

import pytest


def make_result(file_dependencies) -> ChildCompilationResult:
    return ChildCompilationResult(
        name="child",
        entry="/src/a.html",
        modules=(),
        file_dependencies=file_dependencies,
        hash="dummy",
    )


def test_tracking_pass():
    tracker = DependencyTracker()
    assert tracker.dependencies == ()
    assert not tracker.is_tracking

    with tracker.tracking_pass():
        assert tracker.is_tracking
        tracker.record("/src/a.html")
        tracker.record("/src/partials/b.html")
        tracker.record("/src/a.html")

    assert not tracker.is_tracking
    assert tracker.dependencies == ("/src/a.html", "/src/partials/b.html")

    with tracker.tracking_pass():
        tracker.record("/src/c.html")
    assert tracker.dependencies == ("/src/c.html",)


def test_tracking_pass_ends_on_error():
    tracker = DependencyTracker()
    with pytest.raises(RuntimeError):
        with tracker.tracking_pass():
            tracker.record("/src/a.html")
            raise RuntimeError("compilation broke")
    assert not tracker.is_tracking
    assert tracker.dependencies == ("/src/a.html",)


def test_misuse():
    tracker = DependencyTracker()
    with pytest.raises(ValueError):
        tracker.record("/src/a.html")
    with pytest.raises(ValueError):
        tracker.end_pass()

    tracker.begin_pass()
    with pytest.raises(ValueError):
        tracker.begin_pass()
    assert tracker.end_pass() == ()


@pytest.mark.parametrize(
    "file_dependencies",
    [
        (),
        ("/src/a.html",),
        ("/src/b.html", "/src/a.html"),
    ],
)
def test_observe_passes_through(file_dependencies):
    tracker = DependencyTracker()
    assert tracker.observe(make_result(file_dependencies)) == file_dependencies
    assert tracker.dependencies == file_dependencies
