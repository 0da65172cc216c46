#!/usr/bin/env python3

"""
This module provides the entry point to the program and defines the command-line interface.
"""

# Standard library imports
import json
import csv
import os
import argparse

# Local imports
from heatbal.project import Project


def run_project(inp_filename, no_run=False, display_extra_warnings=False):
    file_name = os.path.splitext(os.path.basename(inp_filename))[0]
    file_path = os.path.splitext(os.path.abspath(inp_filename))[0]
    results_folder = os.path.join(file_path + '__results', '')
    os.makedirs(results_folder, exist_ok=True)
    output_file_name_stub = results_folder + file_name + '__'
    output_file_detailed = output_file_name_stub + 'results.csv'
    output_file_constructions = output_file_name_stub + 'results_constructions.csv'
    output_file_surfaces = output_file_name_stub + 'results_surfaces.csv'
    output_file_summary = output_file_name_stub + 'results_summary.csv'
    output_file_sizing = output_file_name_stub + 'results_sizing.csv'
    output_file_diagnostics = output_file_name_stub + 'results_diagnostics.txt'

    with open(inp_filename) as json_file:
        project_dict = json.load(json_file)

    project = Project(project_dict, display_extra_warnings)
    model = project.model()

    # Static outputs describing the constructions and surfaces
    write_construction_output_file(output_file_constructions, project.construction_summary())
    write_surface_output_file(output_file_surfaces, project.surface_summary())

    if not no_run:
        timestep_array, output_variables = project.run()
        write_core_output_file(output_file_detailed, timestep_array, output_variables)
        write_core_output_file_summary(output_file_summary, output_variables)
        write_sizing_output_file(output_file_sizing, model.sizing_report.rows())

    model.diagnostics.report()
    write_diagnostics_output_file(output_file_diagnostics, model.diagnostics)

def write_construction_output_file(output_file, construction_rows):
    # Note: need to specify newline='' below, otherwise an extra carriage return
    # character is written when running on Windows
    with open(output_file, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow([
            'Construction', 'Layers', 'Window', 'Outside roughness',
            'Nominal R', 'Nominal U',
            ])
        writer.writerow(['', '', '', '', '[m2.K / W]', '[W / m2.K]'])
        for row in construction_rows:
            writer.writerow(row)

def write_surface_output_file(output_file, surface_rows):
    with open(output_file, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['Surface', 'Class', 'Construction', 'Nominal U with films', 'Valid'])
        writer.writerow(['', '', '', '[W / m2.K]', ''])
        for row in surface_rows:
            writer.writerow(row)

def write_core_output_file(output_file, timestep_array, output_variables):
    variables = output_variables.variables()
    with open(output_file, 'w', newline='') as f:
        writer = csv.writer(f)
        headings = ['Timestep']
        units_row = ['[hours]']
        for key, variable_name in variables:
            headings.append(key + ': ' + variable_name)
            units_row.append('[' + output_variables.units(key, variable_name) + ']')
        writer.writerow(headings)
        writer.writerow(units_row)

        for t_idx, t_current in enumerate(timestep_array):
            row = [t_current]
            for key, variable_name in variables:
                row.append(output_variables.results(key, variable_name)[t_idx])
            writer.writerow(row)

def write_core_output_file_summary(output_file, output_variables):
    with open(output_file, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['Key', 'Variable', 'Units', 'Total or mean'])
        for key, variable_name in output_variables.variables():
            writer.writerow([
                key,
                variable_name,
                output_variables.units(key, variable_name),
                output_variables.summary(key, variable_name),
                ])

def write_sizing_output_file(output_file, sizing_rows):
    with open(output_file, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['Component type', 'Component name', 'Description', 'Value'])
        for row in sizing_rows:
            writer.writerow(row)

def write_diagnostics_output_file(output_file, diagnostics):
    with open(output_file, 'w') as f:
        for diag in diagnostics:
            for line in diag.lines():
                f.write(line + '\n')


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Zone heat balance data core')
    parser.add_argument(
        'input_file',
        nargs='+',
        help=('path(s) to file(s) containing building specifications to run'),
        )
    parser.add_argument(
        '--parallel', '-p',
        action='store',
        type=int,
        default=0,
        help=('run calculations for different input files in parallel '
              '(specify no of files to run simultaneously)'),
        )
    parser.add_argument(
        '--no-run',
        action='store_true',
        default=False,
        help='read and check the input and write static outputs only',
        )
    parser.add_argument(
        '--extra-warnings',
        action='store_true',
        default=False,
        help='report warnings that are not shown by default',
        )
    cli_args = parser.parse_args()

    inp_filenames = cli_args.input_file
    no_run = cli_args.no_run
    display_extra_warnings = cli_args.extra_warnings

    if cli_args.parallel == 0:
        print('Running '+str(len(inp_filenames))+' cases in series')
        for inpfile in inp_filenames:
            run_project(inpfile, no_run, display_extra_warnings)
    else:
        import multiprocessing as mp
        print('Running '+str(len(inp_filenames))+' cases in parallel'
              ' ('+str(cli_args.parallel)+' at a time)')
        run_project_args = [
            (inpfile, no_run, display_extra_warnings)
            for inpfile in inp_filenames
            ]
        with mp.Pool(processes=cli_args.parallel) as p:
            p.starmap(run_project, run_project_args)
