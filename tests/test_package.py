import pytest

from depotsim.package import Package


def make(route=(3, 5, 7)):
    package = Package(posting_time=10, id=4, origin=3, destination=7)
    package.set_route(route)
    return package


def test_defaults():
    package = Package()
    assert package.id == -1
    assert package.posting_time == -1
    assert package.posted is False
    assert package.arrived()


def test_set_route_copies():
    route = [3, 5, 7]
    package = make(route)
    route.append(9)
    assert package.route == [3, 5, 7]


def test_current_and_next():
    package = make()
    assert package.current_warehouse() == 3
    assert package.next_warehouse() == 5


def test_advance_walks_route():
    package = make()
    package.advance()
    assert package.current_warehouse() == 5
    assert package.next_warehouse() == 7
    package.advance()
    assert package.current_warehouse() == 7
    with pytest.raises(RuntimeError):
        package.next_warehouse()
    package.advance()
    assert package.arrived()


def test_advance_on_empty_route_is_harmless():
    package = make(())
    package.advance()
    assert package.route == []


def test_empty_route_raises():
    package = make(())
    with pytest.raises(RuntimeError):
        package.current_warehouse()
    with pytest.raises(RuntimeError):
        package.next_warehouse()


def test_describe_with_route():
    lines = make().describe().splitlines()
    assert lines[0] == "Pacote ID: 4"
    assert lines[1] == "Origem: Armazém 3"
    assert lines[2] == "Destino: Armazém 7"
    assert lines[3] == "Tempo de Chegada: 10"
    assert lines[4] == "Rota do Pacote: 3 5 7"


def test_describe_without_route():
    assert make(()).describe().endswith("Nenhum armazém na rota.")