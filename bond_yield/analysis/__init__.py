'''
Bond analysis utilities.

Note: To avoid RuntimeWarning when using -m flag, import directly:
  from bond_yield.analysis.batch_valuation import batch_valuation
  from bond_yield.analysis.sensitivity import YtmSensitivityBuilder
'''
