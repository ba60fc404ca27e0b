# apps/domains/results/serializers/student_exam_result.py
from rest_framework import serializers


class StudentExamResultItemSerializer(serializers.Serializer):
    question_id = serializers.IntegerField()
    number = serializers.IntegerField()
    text = serializers.CharField()
    kind = serializers.CharField()
    answer = serializers.CharField(allow_null=True)
    correct_answer = serializers.CharField()
    is_correct = serializers.BooleanField()
    earned = serializers.IntegerField()
    appealed = serializers.BooleanField()


class StudentExamResultSerializer(serializers.Serializer):
    exam_id = serializers.IntegerField()
    exam_title = serializers.CharField()
    submission_id = serializers.IntegerField()
    submitted_at = serializers.DateTimeField()
    cheating_detected = serializers.BooleanField()
    points_per_question = serializers.IntegerField()
    score = serializers.IntegerField()
    max_score = serializers.IntegerField()
    manual_score_adjustment = serializers.IntegerField()
    correct_count = serializers.IntegerField()
    question_count = serializers.IntegerField()
    percentage = serializers.FloatField()
    items = StudentExamResultItemSerializer(many=True)
