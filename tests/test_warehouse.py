import pytest

from depotsim.package import Package
from depotsim.warehouse import Warehouse


def make_warehouse():
    warehouse = Warehouse(0)
    warehouse.add_neighbor(1)
    warehouse.add_neighbor(2)
    return warehouse


def make_package(package_id, route):
    package = Package(posting_time=0, id=package_id, origin=route[0], destination=route[-1])
    package.set_route(route)
    return package


def test_neighbors_keep_order():
    assert make_warehouse().neighbors == (1, 2)


def test_unknown_neighbor_raises():
    warehouse = make_warehouse()
    with pytest.raises(ValueError):
        warehouse.section(9)
    with pytest.raises(ValueError):
        warehouse.transport_section(9)


def test_store_uses_next_warehouse():
    warehouse = make_warehouse()
    warehouse.store(make_package(5, [0, 2, 1]))
    assert warehouse.package_count(2) == 1
    assert warehouse.package_count(1) == 0
    assert warehouse.section(2).peek() == 5
    assert warehouse.has_packages(2)
    assert not warehouse.has_packages(1)


def test_store_in_transport():
    warehouse = make_warehouse()
    warehouse.store_in_transport(make_package(6, [0, 1]), 1)
    assert list(warehouse.transport_section(1)) == [6]
    assert not warehouse.is_empty()


def test_remove_package():
    warehouse = make_warehouse()
    for package_id in (3, 4, 5):
        warehouse.store(make_package(package_id, [0, 1]))
    assert warehouse.remove_package(1, 4)
    assert list(warehouse.section(1)) == [5, 3]
    assert not warehouse.remove_package(1, 4)


def test_clear_section_and_is_empty():
    warehouse = make_warehouse()
    assert warehouse.is_empty()
    warehouse.store(make_package(1, [0, 1]))
    assert not warehouse.is_empty()
    warehouse.clear_section(1)
    assert warehouse.is_empty()


def test_sections_are_independent():
    warehouse = make_warehouse()
    warehouse.store(make_package(8, [0, 1]))
    assert len(warehouse.transport_section(1)) == 0
    assert warehouse.section(1) is not warehouse.section(2)


def test_describe_neighbors():
    assert make_warehouse().describe_neighbors() == "Vizinhos do Armazem 0: 1 2"
    assert Warehouse(3).describe_neighbors() == "Vizinhos do Armazem 3: Nenhum vizinho encontrado."


def test_describe_section():
    warehouse = make_warehouse()
    assert warehouse.describe_section(2) == "imprimindo pilha para o vizinho:2\nPilha vazia!"
    warehouse.store(make_package(7, [0, 2]))
    assert warehouse.describe_section(2).splitlines()[1] == "Itens na pilha: 7"