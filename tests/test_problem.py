from itertools import accumulate

import pytest

from flowshop.problem import Problem
from flowshop.task import Task


def make_problem():
    return Problem(
        [Task([4, 2, 5], 0), Task([1, 6, 3], 1), Task([7, 3, 2], 2), Task([2, 2, 8], 3)],
        3,
    )


def test_from_file_reads_tasks(tmp_path):
    path = tmp_path / "problem.txt"
    path.write_text("3 2\n1 2\n3 4\n5 6\n")
    problem = Problem.from_file(path)
    assert problem.task_count() == 3
    assert problem.machine_count == 2
    assert problem.tasks[1].operations == [3, 4]
    assert [t.id for t in problem.tasks] == [0, 1, 2]


def test_from_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Problem.from_file(tmp_path / "absent.txt")


def test_from_file_short_data_raises(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("2 2\n1 2\n3\n")
    with pytest.raises(ValueError):
        Problem.from_file(path)


def test_simulate_single_machine_is_total_time():
    ops = [3, 9, 1, 4]
    problem = Problem([Task([op], i) for i, op in enumerate(ops)], 1)
    assert problem.simulate() == sum(ops)


def test_simulate_single_task_is_its_sum():
    task = Task([5, 1, 7, 2], 0)
    assert Problem([task], 4).simulate() == task.operation_time_sum()


def test_simulate_empty_is_zero():
    assert Problem([], 3).simulate() == 0


def test_simulate_bounded_below():
    problem = make_problem()
    makespan = problem.simulate()
    for machine in range(problem.machine_count):
        assert makespan >= sum(t.operation(machine) for t in problem.tasks)
    assert makespan >= max(t.operation_time_sum() for t in problem.tasks)


def test_paths_in_matches_simulate_and_first_row():
    problem = make_problem()
    table = problem.paths_in()
    last_col = problem.task_count() - 1
    assert table.get_at(problem.machine_count - 1, last_col) == problem.simulate()
    first_row = [table.get_at(0, c) for c in range(problem.task_count())]
    assert first_row == list(accumulate(t.operation(0) for t in problem.tasks))


def test_table_holds_operations():
    problem = make_problem()
    table = problem.table()
    for c, task in enumerate(problem.tasks):
        for r in range(problem.machine_count):
            assert table.get_at(r, c) == task.operation(r)


def test_rearrange_reorders():
    problem = make_problem()
    problem.rearrange([3, 1, 0, 2])
    assert [t.id for t in problem.tasks] == [3, 1, 0, 2]


def test_rearrange_out_of_range():
    problem = make_problem()
    with pytest.raises(IndexError):
        problem.rearrange([0, 9])


def test_remove_task():
    problem = make_problem()
    problem.remove_task(Task([1, 6, 3], 1))
    assert [t.id for t in problem.tasks] == [0, 2, 3]


def test_sort_by_operations_length():
    problem = make_problem()
    before = sorted(t.id for t in problem.tasks)
    problem.sort_by_operations_length()
    sums = [t.operation_time_sum() for t in problem.tasks]
    assert sums == sorted(sums, reverse=True)
    assert sorted(t.id for t in problem.tasks) == before


def test_str_format():
    problem = Problem([Task([1, 2], 0), Task([3, 4], 1)], 2)
    assert str(problem) == "Task count: 2\nMachine count: 2\n1) 1, 2, \n2) 3, 4, \n"


def test_paths_out_single_machine_first_column_is_total():
    ops = [2, 8, 5]
    problem = Problem([Task([op], i) for i, op in enumerate(ops)], 1)
    assert problem.paths_out().get_at(0, 0) == problem.simulate()


def test_paths_out_last_column_is_tail_of_last_task():
    problem = make_problem()
    table = problem.paths_out()
    last = problem.tasks[-1]
    last_col = problem.task_count() - 1
    assert table.get_at(0, last_col) == last.operation_time_sum()
    m = problem.machine_count - 1
    assert table.get_at(m, last_col) == last.operation(m)


def test_paths_out_empty_has_no_columns():
    table = Problem([], 2).paths_out()
    with pytest.raises(IndexError):
        table.get_at(0, 0)