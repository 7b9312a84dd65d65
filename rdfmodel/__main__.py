#===============================================================================
#
#  CellDL and bondgraph tools
#
#  Copyright (c) 2020 - 2025 David Brooks
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

import logging
from pathlib import Path
import sys

#===============================================================================

from rdfmodel import RdfModel, __version__
from rdfmodel.model.references import reference_cycles
from rdfmodel.rdf.convert import graph_from_model, load_model
from rdfmodel.rdf.namespace import get_curie
from rdfmodel.utils import Issue, log, make_issue, pretty_log, set_log_level

#===============================================================================
#===============================================================================

def resource_name(resource) -> str:
#==================================
    return get_curie(resource.uri) if resource.uri is not None else str(resource)

def show_roots(model: RdfModel):
#===============================
    roots = model.root_resources(key=lambda resource: (resource.uri is None, resource.uri or '', resource.serial))
    log.info(f'{len(roots)} root resources')
    for resource in roots:
        print(resource_name(resource))

def show_references(model: RdfModel):
#====================================
    references = model.compute_references()
    for resource, referrers in references.items():
        names = sorted(resource_name(referrer) for referrer in referrers)
        print(f'{resource_name(resource)} <- {", ".join(names)}')

def show_cycles(model: RdfModel):
#================================
    cycles = reference_cycles(model.compute_references())
    if len(cycles) == 0:
        log.info('No reference cycles')
    for cycle in cycles:
        print(' -> '.join(resource_name(resource) for resource in cycle + cycle[:1]))

#===============================================================================

def summarise_rdf(rdf_source: str, output: Path|None=None, roots: bool=False,
                  references: bool=False, cycles: bool=False) -> RdfModel:
#===============================================================================
    source_path = Path(rdf_source).resolve()
    if not source_path.exists():
        raise IOError(f'Missing RDF source file: {rdf_source}')
    with open(source_path) as fp:
        source = fp.read()
    log.info(f'Loading {pretty_log(source_path)}')
    model = load_model(source, base_iri=source_path.as_uri())
    log.info(f'Loaded {model.resource_count} resources')
    if roots:
        show_roots(model)
    if references:
        show_references(model)
    if cycles:
        show_cycles(model)
    if output is not None:
        with open(output, 'w') as fp:
            fp.write(graph_from_model(model).serialise(model.base_uri))
        log.info(f'Model saved as {pretty_log(output)}')
    return model

#===============================================================================

def main():
    import argparse
    parser = argparse.ArgumentParser(description='Load an RDF resource model from Turtle')
    parser.add_argument('-v', '--version', action='version', version=__version__)
    parser.add_argument('--debug', action='store_true', help='Show debug logging')
    parser.add_argument('--roots', action='store_true', help='List root resources')
    parser.add_argument('--references', action='store_true', help='List resources and the resources referencing them')
    parser.add_argument('--cycles', action='store_true', help='List reference cycles')
    parser.add_argument('--output', metavar='OUTPUT_FILE', help='Save the model as Turtle')
    parser.add_argument('rdf', metavar='RDF', help='Input Turtle source file')

    args = parser.parse_args()

    if args.debug:
        set_log_level(logging.DEBUG)
    try:
        summarise_rdf(args.rdf, Path(args.output) if args.output else None,
                      roots=args.roots, references=args.references, cycles=args.cycles)
    except (Issue, OSError) as e:
        log.error(make_issue(e).reason)
        sys.exit(1)

#===============================================================================

if __name__ == '__main__':
    main()

#===============================================================================
#===============================================================================
