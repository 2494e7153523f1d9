import logging

from modelver.migration import convert_many, convert_one

V1 = '{"major":1,"minor":0,"patch":0}'
V2 = '{"major":2,"minor":0,"patch":0}'


def upgrade_v1_to_v2(obj, options):
    return {**obj, "modelVersion": V2, "upgraded": True}


def reject(obj, options):
    return None


def resolver(version):
    return [upgrade_v1_to_v2] if version.major == 1 else []


def test_batch_runs_chain_per_object():
    first = {"_id": "a", "modelVersion": V1}
    second = {"_id": "b", "modelVersion": V2}

    result = convert_many([first, second], resolver)

    assert result == [
        {"_id": "a", "modelVersion": V2, "upgraded": True},
        {"_id": "b", "modelVersion": V2},
    ]
    assert result[1] is second


def test_rejected_objects_are_dropped():
    assert convert_many([{"_id": "a"}, {"_id": "b"}], lambda v: [reject]) == []
    assert convert_one({"_id": "a"}, lambda v: [reject]) is None


def test_rejection_keeps_survivor_order():
    def drop_b(obj, options):
        return None if obj["_id"] == "b" else obj

    objs = [{"_id": "a"}, {"_id": "b"}, {"_id": "c"}]
    result = convert_many(objs, lambda v: [drop_b])
    assert [o["_id"] for o in result] == ["a", "c"]
    assert len(objs) == 3


def test_rejection_skips_remaining_converters():
    calls = []

    def after(obj, options):
        calls.append(obj)
        return obj

    assert convert_one({"_id": "a"}, lambda v: [reject, after]) is None
    assert calls == []


def test_single_call_returns_single_object():
    obj = {"_id": "a", "modelVersion": V1}
    result = convert_one(obj, resolver)
    assert isinstance(result, dict)
    assert result["upgraded"] is True


def test_missing_inputs_are_noop():
    objs = [{"_id": "a"}]
    assert convert_many(objs, None) is objs
    assert convert_many(None, resolver) is None
    assert convert_one(objs[0], None) is objs[0]
    assert convert_one(None, resolver) is None
    assert convert_many([], resolver) == []


def test_converters_fold_in_order_with_options():
    seen = []

    def step(name):
        def fn(obj, options):
            seen.append((name, options))
            return {**obj, "steps": obj.get("steps", []) + [name]}

        return fn

    options = {"key": "secret"}
    result = convert_one({}, lambda v: [step("one"), step("two")], options)
    assert result["steps"] == ["one", "two"]
    assert seen == [("one", options), ("two", options)]


def test_resolver_sees_each_objects_version():
    versions_seen = []

    def recording(version):
        versions_seen.append(version)
        return []

    convert_many([{"modelVersion": V1}, {}, {"modelVersion": V2}], recording)
    assert [str(v) for v in versions_seen] == ["1.0.0", "unknown", "2.0.0"]


def test_malformed_version_does_not_abort_batch(caplog):
    versions_seen = []

    def recording(version):
        versions_seen.append(version)
        return [upgrade_v1_to_v2]

    objs = [{"_id": "bad", "modelVersion": "{oops"}, {"_id": "good", "modelVersion": V1}]
    with caplog.at_level(logging.WARNING, logger="modelver.migration"):
        result = convert_many(objs, recording)

    assert [o["_id"] for o in result] == ["bad", "good"]
    assert versions_seen[0].is_unknown
    assert "_id='bad'" in caplog.text


def test_out_of_range_version_does_not_abort_batch():
    objs = [{"_id": "huge", "modelVersion": '{"major":1e400}'}, {"_id": "ok"}]
    result = convert_many(objs, lambda v: [])
    assert [o["_id"] for o in result] == ["huge", "ok"]
