from datetime import datetime, timezone

import pytest

from fluentops.meta import ObjectMeta
from fluentops.workloads import (
    COLLECTOR_FINALIZER_NAME,
    FLUENT_BIT_FINALIZER_NAME,
    Collector,
    CollectorList,
    CollectorSpec,
    FluentBit,
    FluentBitList,
    FluentBitSpec,
)


def test_finalizer_names_added_to_metadata():
    fb = FluentBit()
    fb.add_finalizer(FLUENT_BIT_FINALIZER_NAME)
    co = Collector()
    co.add_finalizer(COLLECTOR_FINALIZER_NAME)
    assert fb.metadata.finalizers == ["fluentbit.fluent.io"]
    assert co.metadata.finalizers == ["collector.fluent.io"]


@pytest.mark.parametrize(
    "resource, finalizer",
    [
        (FluentBit(), FLUENT_BIT_FINALIZER_NAME),
        (Collector(), COLLECTOR_FINALIZER_NAME),
    ],
)
def test_finalizer_round_trip(resource, finalizer):
    assert resource.has_finalizer(finalizer) is False
    resource.add_finalizer(finalizer)
    assert resource.has_finalizer(finalizer) is True
    assert resource.metadata.finalizers == [finalizer]
    resource.remove_finalizer(finalizer)
    assert resource.has_finalizer(finalizer) is False


@pytest.mark.parametrize("cls", [FluentBit, Collector])
def test_is_being_deleted(cls):
    alive = cls(metadata=ObjectMeta(name="fluent-bit"))
    doomed = cls(
        metadata=ObjectMeta(
            name="fluent-bit",
            deletion_timestamp=datetime(2023, 3, 1, tzinfo=timezone.utc),
        )
    )
    assert alive.is_being_deleted() is False
    assert doomed.is_being_deleted() is True


def test_remove_keeps_other_finalizers():
    fb = FluentBit(metadata=ObjectMeta(finalizers=["other", FLUENT_BIT_FINALIZER_NAME]))
    fb.remove_finalizer(FLUENT_BIT_FINALIZER_NAME)
    assert fb.metadata.finalizers == ["other"]


def test_spec_defaults():
    spec = FluentBitSpec()
    assert spec.metrics_port == 0
    assert spec.affinity is None
    assert CollectorSpec().buffer_path is None


def test_spec_collections_not_shared():
    first = FluentBitSpec()
    second = FluentBitSpec()
    first.args.append("--watch")
    assert second.args == []
    c1 = CollectorSpec()
    c1.secrets.append("s")
    assert CollectorSpec().secrets == []


def test_lists_hold_items():
    fb_list = FluentBitList(items=[FluentBit(spec=FluentBitSpec(image="fluent-bit:v2.0.9"))])
    co_list = CollectorList(items=[Collector(), Collector()])
    assert [item.spec.image for item in fb_list.items] == ["fluent-bit:v2.0.9"]
    assert len(co_list.items) == 2