from taskmaster import filter_by_completion, filter_by_description, find_task, list_tasks


class TestFilterByCompletion:
    def test_keeps_matching_tasks_in_order(self, make_task):
        tasks = [
            make_task("1", completed=True),
            make_task("2"),
            make_task("3", completed=True),
            make_task("4"),
        ]
        assert [t.id for t in filter_by_completion(tasks, True)] == ["1", "3"]
        assert [t.id for t in filter_by_completion(tasks, False)] == ["2", "4"]

    def test_no_match_is_empty_list(self, make_task):
        assert filter_by_completion([make_task("1")], True) == []

    def test_does_not_mutate_input(self, make_task):
        tasks = [make_task("1", completed=True), make_task("2")]
        result = filter_by_completion(tasks, True)
        result.clear()
        assert len(tasks) == 2


class TestFilterByDescription:
    def test_case_insensitive_match(self, make_task):
        task = make_task("1", "Buy Milk")
        assert filter_by_description([task], "milk") == [task]
        assert filter_by_description([task], "BUY") == [task]

    def test_substring_anywhere(self, make_task):
        tasks = [make_task("1", "Call the plumber"), make_task("2", "Plumbing invoice"), make_task("3", "Walk")]
        assert [t.id for t in filter_by_description(tasks, "plumb")] == ["1", "2"]

    def test_empty_needle_returns_everything_in_order(self, make_task):
        tasks = [make_task("1", "b"), make_task("2", "a"), make_task("3", "")]
        assert filter_by_description(tasks, "") == tasks

    def test_null_description_never_matches(self, make_task):
        tasks = [make_task("1", None), make_task("2", "anything")]
        assert [t.id for t in filter_by_description(tasks, "")] == ["2"]
        assert [t.id for t in filter_by_description(tasks, "any")] == ["2"]

    def test_non_ascii(self, make_task):
        task = make_task("1", "Revisión ÁRBOL")
        assert filter_by_description([task], "árbol") == [task]

    def test_no_match_is_empty_list(self, make_task):
        assert filter_by_description([make_task("1", "Buy milk")], "bread") == []


class TestLookup:
    def test_find_returns_first_match(self, make_task):
        first = make_task("dup", "first")
        tasks = [make_task("x"), first, make_task("dup", "second")]
        assert find_task(tasks, "dup") is first

    def test_find_missing_returns_none(self, make_task):
        assert find_task([make_task("x")], "y") is None

    def test_list_tasks_is_a_copy_in_order(self, make_task):
        tasks = [make_task("1"), make_task("2")]
        listed = list_tasks(tasks)
        assert listed == tasks
        assert listed is not tasks
