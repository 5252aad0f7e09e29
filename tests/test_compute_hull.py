import pytest

import compute_hull


def test_hull_from_file(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("0 0\n0 10\n10 10\n10 0\n5 5\n")

    hull = compute_hull.main([str(path), "--log-dir", str(tmp_path / "logs")])

    assert hull == [(0, 0), (10, 0), (10, 10), (0, 10)]
    assert capsys.readouterr().out.splitlines()[:4] == ["0 0", "10 0", "10 10", "0 10"]


def test_random_points_and_save(tmp_path):
    plot_path = tmp_path / "hull.png"
    hull = compute_hull.main(["--random", "30", "--seed", "1", "--save", str(plot_path),
                              "--log-dir", str(tmp_path / "logs")])
    assert hull
    assert plot_path.exists()


@pytest.mark.parametrize("argv", [[], ["points.txt", "--random", "3"], ["does-not-exist.txt"]])
def test_bad_arguments(tmp_path, argv):
    with pytest.raises(SystemExit):
        compute_hull.main(argv + ["--log-dir", str(tmp_path / "logs")])
