'''
Bond yield engine for fixed-coupon, bullet-repayment bonds.

Turns face value, coupon rate, market price, years to maturity and coupon
frequency into a current yield, a yield to maturity (Newton-Raphson), total
interest, a Premium/Discount/Par classification and a periodic cash-flow
schedule.

Usage:
  from bond_yield.run import calculate

  result = calculate({
    'faceValue': 1000,
    'couponRate': 5,
    'marketPrice': 950,
    'yearsToMaturity': 10,
    'couponFrequency': 'semi-annual',
  })
  result.to_dict()
'''

__version__ = '0.1.0'
