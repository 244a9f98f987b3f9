from .dataset_sets import *
