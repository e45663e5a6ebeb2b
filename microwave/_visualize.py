# -*- test-case-name: microwave._test.test_visualize -*-

"""
Draw a L{FlagMachine}'s states and transitions with graphviz.
"""

import argparse

import graphviz

from ._appliance import Microwave


def stateLabel(machine, state):
    """
    One line per flag, e.g. C{"door_open: False"}.
    """
    return "\n".join("{}: {}".format(name, value)
                     for name, value in machine.asDict(state).items())


def nodeName(state):
    return "s" + "_".join(str(value) for value in state)


def makeDigraph(machine):
    """
    Produce a L{graphviz.Digraph} with a node for every state of C{machine}
    and an edge, labelled with the input and its outputs, for every
    transition.
    """
    digraph = graphviz.Digraph(graph_attr={'dpi': '100'},
                               node_attr={'fontname': 'Menlo',
                                          'shape': 'box',
                                          'style': 'rounded'},
                               edge_attr={'fontname': 'Menlo',
                                          'fontsize': '10'})
    initial = machine.initialState()
    for state in machine.states():
        digraph.node(nodeName(state), label=stateLabel(machine, state),
                     penwidth="3" if state == initial else "1")

    for state, input_, target, outputs in sorted(
            machine.edges(), key=lambda edge: (edge[0], edge[1].name)):
        label = input_.name
        if outputs:
            label += "\n[{}]".format(", ".join(o.__name__ for o in outputs))
        digraph.edge(nodeName(state), nodeName(target), label=label)
    return digraph


def tool(argv=None, _makeDigraph=makeDigraph, _print=print):
    """
    Entry point for command line utility.
    """
    argumentParser = argparse.ArgumentParser(
        description="Draw the microwave's states and transitions.",
        epilog="Rendering images needs the graphviz tool suite, "
               "http://www.graphviz.org.")
    argumentParser.add_argument('--directory', '-d',
                                help="Where to write the files.",
                                default=".microwave_visualize")
    argumentParser.add_argument('--image-type', '-t',
                                help="The image format.",
                                choices=sorted(graphviz.FORMATS),
                                default='png')
    argumentParser.add_argument('--dot-only',
                                help="Write the .dot source and stop.",
                                default=False,
                                action="store_true")
    argumentParser.add_argument('--view', '-v',
                                help="Open the image once it is rendered.",
                                default=False,
                                action="store_true")
    argumentParser.add_argument('--quiet', '-q',
                                help="Suppress output.",
                                default=False,
                                action="store_true")
    args = argumentParser.parse_args(argv)
    say = (lambda *words: None) if args.quiet else _print

    digraph = _makeDigraph(Microwave.machine)
    if args.dot_only:
        path = digraph.save(filename="microwave.dot",
                            directory=args.directory)
    else:
        path = digraph.render(filename="microwave.dot",
                              directory=args.directory,
                              format=args.image_type,
                              view=args.view,
                              cleanup=True)
    say("wrote", path)
    return 0
