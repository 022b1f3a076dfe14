"""
rupaul task collection.

Task modules are collected into a single flat namespace for the program.
"""

from invoke import Collection

from . import drag

namespace = Collection()
for submodule in [drag]:
    submodule_collection = Collection.from_module(submodule)
    for task_name, task in submodule_collection.tasks.items():
        namespace.add_task(task)
