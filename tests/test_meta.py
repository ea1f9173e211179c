from datetime import datetime, timezone

from fluentops.meta import (
    GROUP_NAME,
    SCHEME_GROUP_VERSION,
    GroupVersion,
    ObjectMeta,
    TypeMeta,
)


def test_scheme_group_version_api_version():
    assert SCHEME_GROUP_VERSION.api_version() == "fluentbit.fluent.io/v1alpha2"
    assert SCHEME_GROUP_VERSION.group == GROUP_NAME


def test_core_group_api_version_is_only_version():
    assert GroupVersion(group="", version="v1").api_version() == "v1"


def test_type_meta_holds_values():
    meta = TypeMeta(api_version="fluentbit.fluent.io/v1alpha2", kind="ClusterFilter")
    assert meta.kind == "ClusterFilter"
    assert meta.api_version == SCHEME_GROUP_VERSION.api_version()


def test_is_being_deleted():
    meta = ObjectMeta(name="filter0")
    assert meta.is_being_deleted() is False
    meta.deletion_timestamp = datetime(2023, 1, 1, tzinfo=timezone.utc)
    assert meta.is_being_deleted() is True


def test_finalizer_round_trip():
    meta = ObjectMeta(name="fb")
    assert meta.has_finalizer("fluentbit.fluent.io") is False
    meta.add_finalizer("fluentbit.fluent.io")
    assert meta.has_finalizer("fluentbit.fluent.io") is True
    meta.remove_finalizer("fluentbit.fluent.io")
    assert meta.has_finalizer("fluentbit.fluent.io") is False
    assert meta.finalizers == []


def test_remove_finalizer_keeps_others_and_order():
    meta = ObjectMeta(finalizers=["a", "b", "a", "c"])
    meta.remove_finalizer("a")
    assert meta.finalizers == ["b", "c"]


def test_add_finalizer_appends_in_order():
    meta = ObjectMeta()
    meta.add_finalizer("x")
    meta.add_finalizer("y")
    assert meta.finalizers == ["x", "y"]


def test_default_collections_are_independent():
    first = ObjectMeta()
    second = ObjectMeta()
    first.add_finalizer("x")
    first.labels["k"] = "v"
    assert second.finalizers == []
    assert second.labels == {}