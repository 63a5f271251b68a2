# students/utils.py
from decimal import Decimal


def summarize_results(results):
    """Total and average score over a student's results, average rounded to 2 places."""
    scores = [Decimal(str(result.score or 0)) for result in results]
    total = sum(scores, Decimal('0'))
    average = (total / len(scores)).quantize(Decimal('0.01')) if scores else Decimal('0')
    return {
        'total_subjects': len(scores),
        'total_score': total,
        'average_score': average,
    }


def display_or_na(value):
    return value if value else 'N/A'
