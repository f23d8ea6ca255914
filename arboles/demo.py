"""Command-line walkthrough of the tree structures."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from arboles.bplustree import BPlusTree
from arboles.btree import BTree
from arboles.general_tree import Node
from arboles.xml_io import load_xml, save_xml


def _separator(title: str) -> None:
    print()
    print(f"  {title}")


def _joined(values: Iterable) -> str:
    return " ".join(str(value) for value in values)


def _general_tree_demo(xml_path: str) -> int:
    _separator("CREACION DEL ARBOL")
    nodes = {n: Node(n) for n in range(1, 10)}
    for parent, child in [(1, 2), (1, 3), (1, 4), (2, 5), (2, 6), (4, 7), (4, 8), (6, 9)]:
        nodes[parent].add_child(nodes[child])
    root = nodes[1]
    print("Arbol creado con exito.")

    _separator("CONSULTAS BASICAS")
    print(f"Raiz desde nodo 9:            {nodes[9].root().data}")
    print(f"Padre de nodo 6:              {nodes[6].parent.data}")
    print(f"Primer hijo de nodo 2:        {nodes[2].first_child.data}")
    print(f"Hermano derecho de nodo 2:    {nodes[2].right_sibling.data}")
    print(f"Contenido de nodo 4:          {nodes[4].data}")

    _separator("RECORRIDOS")
    print(f"Preorden:   {_joined(root.preorder())}")
    print(f"Inorden:    {_joined(root.inorder())}")
    print(f"Postorden:  {_joined(root.postorder())}")

    _separator("INSERCION")
    print("Insertando nodo 10 como hijo de nodo 3...")
    root.insert(3, 10)
    print(f"Preorden:   {_joined(root.preorder())}")

    _separator("ELIMINACION")
    print("Eliminando nodo 4 (y su subarbol)...")
    root.remove(4)
    print(f"Preorden:   {_joined(root.preorder())}")

    _separator("PERSISTENCIA XML - GUARDAR")
    try:
        save_xml(root, xml_path)
    except OSError as error:
        print(f"Error: No se pudo abrir el archivo '{xml_path}' para escritura: {error}",
              file=sys.stderr)
        return 1
    print(f"Arbol guardado exitosamente en '{xml_path}'.")
    print(f"\nContenido de {xml_path}:\n")
    with open(xml_path, encoding="utf-8") as stream:
        for line in stream:
            print(f"  {line}", end="")

    _separator("PERSISTENCIA XML - CARGAR")
    try:
        loaded = load_xml(xml_path, int)
    except OSError as error:
        print(f"Error: No se pudo abrir el archivo '{xml_path}' para lectura: {error}",
              file=sys.stderr)
        return 1
    print(f"Arbol cargado exitosamente desde '{xml_path}'.")
    if loaded is not None:
        print(f"Preorden del arbol cargado: {_joined(loaded.preorder())}")
    return 0


def _btree_demo() -> int:
    tree = BTree(4)
    for value in (10, 20, 30, 40, 50):
        tree.insert(value)
    print("Acceso secuencial inicial:")
    print(_joined(tree))
    print(f"Busqueda de 30: {int(30 in tree)}")
    tree.delete_lazy(30)
    print(f"Busqueda de 30 tras borrado perezoso: {int(30 in tree)}")
    print("Acceso secuencial tras borrado:")
    print(_joined(tree))
    return 0


def _bplus_demo() -> int:
    tree = BPlusTree(2)
    for value in (10, 20, 30, 40, 50, 60, 70, 80):
        tree.insert(value)
    print("\nRecorrido ultrarrapido (via Lista Enlazada):")
    print(_joined(tree))
    print("\n--- BORRADO PEREZOSO ---")
    for value in (30, 50):
        try:
            tree.delete_lazy(value)
        except KeyError:
            print(f"Elemento {value} no encontrado para eliminar.")
        else:
            print(f"Elemento {value} borrado perezosamente en la hoja.")
    print("\nRecorrido despues de borrar 30 y 50:")
    print(_joined(tree))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run one or all of the demonstrations and return an exit status."""
    parser = argparse.ArgumentParser(prog="arboles", description="Tree structure demonstrations.")
    parser.add_argument(
        "demo", nargs="?", default="all", choices=["general", "btree", "bplus", "all"],
        help="which demonstration to run",
    )
    parser.add_argument("--xml", default="arbol.xml", help="file used by the XML persistence step")
    args = parser.parse_args(argv)

    status = 0
    if args.demo in ("general", "all"):
        status = _general_tree_demo(args.xml) or status
    if args.demo in ("btree", "all"):
        status = _btree_demo() or status
    if args.demo in ("bplus", "all"):
        status = _bplus_demo() or status
    return status


if __name__ == "__main__":
    sys.exit(main())