import pytest

from depotsim.cli import Workload, load_workload, main, parse_workload, simulate

SAMPLE = """2
20
100
1
2
0 1
1 0
1
0 pac 7 org 0 dst 1
"""

THREE_STOPS = """2 20 100 1
3
0 1 0
1 0 1
0 1 0
2
0 pac 0 org 0 dst 2
5 pac 1 org 2 dst 0
"""


def test_parse_reads_fields():
    workload = parse_workload(SAMPLE)
    assert workload == Workload(2, 20, 100, 1, [[0, 1], [1, 0]], [(0, 0, 1)])


def test_parse_truncated_input_raises():
    with pytest.raises(ValueError):
        parse_workload("2 20 100 1 2 0 1 1")


def test_parse_non_numeric_raises():
    with pytest.raises(ValueError):
        parse_workload("2 20 x 1 0 0")


def test_simulate_sample():
    assert simulate(parse_workload(SAMPLE)) == [
        "0000000 pacote 000 armazenado em 000 na secao 001",
        "0000101 pacote 000 removido de 000 na secao 001",
        "0000101 pacote 000 em transito de 000 para 001",
        "0000121 pacote 000 entregue em 001",
    ]


def test_simulate_uses_position_as_package_id():
    lines = simulate(parse_workload(SAMPLE))
    assert {int(line.split()[2]) for line in lines} == {0}


def test_simulate_delivers_every_package():
    lines = simulate(parse_workload(THREE_STOPS))
    delivered = sorted(int(line.split()[2]) for line in lines if "entregue em" in line)
    assert delivered == [0, 1]


def test_simulate_without_packages_is_silent():
    workload = parse_workload("1 1 10 1 2 0 1 1 0 0")
    assert simulate(workload) == []


def test_load_matches_parse(tmp_path):
    path = tmp_path / "carga.wkl"
    path.write_text(THREE_STOPS)
    assert load_workload(path) == parse_workload(THREE_STOPS)


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Uso" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nada.wkl"
    assert main([str(missing)]) == 1
    assert "Erro ao abrir o arquivo!" in capsys.readouterr().err


def test_main_malformed_file(tmp_path, capsys):
    path = tmp_path / "ruim.wkl"
    path.write_text("1 2")
    assert main([str(path)]) == 1
    assert str(path) in capsys.readouterr().err


def test_main_prints_simulation(tmp_path, capsys):
    path = tmp_path / "carga.wkl"
    path.write_text(THREE_STOPS)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == simulate(load_workload(path))