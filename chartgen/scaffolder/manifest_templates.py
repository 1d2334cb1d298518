"""Static bodies for single-manifest generation.

These templates add one resource of a given kind to an existing chart.  Each
resource gets its own ``<MANIFEST_NAME>_<kind>`` values key, and the chart's
own helpers are referenced through ``<CHARTNAME>``.
"""

INGRESS_VALUES = """
<MANIFEST_NAME>_ingress:
  enabled: false
  className: ""
  annotations: {}
    # kubernetes.io/ingress.class: nginx
    # kubernetes.io/tls-acme: "true"
  hosts:
    - host: chart-example.local
      paths:
        - path: /
          pathType: ImplementationSpecific
  tls: []
  #  - secretName: chart-example-tls
  #    hosts:
  #      - chart-example.local
"""

INGRESS = """\
{{- if .Values.<MANIFEST_NAME>_ingress.enabled -}}
{{- $fullName := include "<CHARTNAME>.fullname" . -}}
{{- $svcPort := .Values.<MANIFEST_NAME>_service.port -}}
{{- if and .Values.<MANIFEST_NAME>_ingress.className (not (semverCompare ">=1.18-0" .Capabilities.KubeVersion.GitVersion)) }}
  {{- if not (hasKey .Values.<MANIFEST_NAME>_ingress.annotations "kubernetes.io/ingress.class") }}
  {{- $_ := set .Values.<MANIFEST_NAME>_ingress.annotations "kubernetes.io/ingress.class" .Values.<MANIFEST_NAME>_ingress.className}}
  {{- end }}
{{- end }}
{{- if semverCompare ">=1.19-0" .Capabilities.KubeVersion.GitVersion -}}
apiVersion: networking.k8s.io/v1
{{- else if semverCompare ">=1.14-0" .Capabilities.KubeVersion.GitVersion -}}
apiVersion: networking.k8s.io/v1beta1
{{- else -}}
apiVersion: extensions/v1beta1
{{- end }}
kind: Ingress
metadata:
  name: {{ $fullName }}-<MANIFEST_NAME>
  labels:
    {{- include "<CHARTNAME>.labels" . | nindent 4 }}
  {{- with .Values.<MANIFEST_NAME>_ingress.annotations }}
  annotations:
    {{- toYaml . | nindent 4 }}
  {{- end }}
spec:
  {{- if and .Values.<MANIFEST_NAME>_ingress.className (semverCompare ">=1.18-0" .Capabilities.KubeVersion.GitVersion) }}
  ingressClassName: {{ .Values.<MANIFEST_NAME>_ingress.className }}
  {{- end }}
  {{- if .Values.<MANIFEST_NAME>_ingress.tls }}
  tls:
    {{- range .Values.<MANIFEST_NAME>_ingress.tls }}
    - hosts:
        {{- range .hosts }}
        - {{ . | quote }}
        {{- end }}
      secretName: {{ .secretName }}
    {{- end }}
  {{- end }}
  rules:
    {{- range .Values.<MANIFEST_NAME>_ingress.hosts }}
    - host: {{ .host | quote }}
      http:
        paths:
          {{- range .paths }}
          - path: {{ .path }}
            {{- if and .pathType (semverCompare ">=1.18-0" $.Capabilities.KubeVersion.GitVersion) }}
            pathType: {{ .pathType }}
            {{- end }}
            backend:
              {{- if semverCompare ">=1.19-0" $.Capabilities.KubeVersion.GitVersion }}
              service:
                name: {{ $fullName }}-<MANIFEST_NAME>
                port:
                  number: {{ $svcPort }}
              {{- else }}
              serviceName: {{ $fullName }}-<MANIFEST_NAME>
              servicePort: {{ $svcPort }}
              {{- end }}
          {{- end }}
    {{- end }}
{{- end }}
"""

SERVICE_VALUES = """
<MANIFEST_NAME>_service:
  type: ClusterIP
  port: 80
"""

SERVICE = """\
apiVersion: v1
kind: Service
metadata:
  name: {{ include "<CHARTNAME>.fullname" . }}-<MANIFEST_NAME>
  labels:
    {{- include "<CHARTNAME>.labels" . | nindent 4 }}
spec:
  type: {{ .Values.<MANIFEST_NAME>_service.type }}
  ports:
    - port: {{ .Values.<MANIFEST_NAME>_service.port }}
      targetPort: http
      protocol: TCP
      name: http
  selector:
    app.kubernetes.io/name: {{ include "<CHARTNAME>.name" . }}-<MANIFEST_NAME>
    app.kubernetes.io/instance: {{ .Release.Name }}
"""

DEPLOYMENT_VALUES = """
<MANIFEST_NAME>_deployment:
  replicaCount: 1

  image:
    repository: nginx
    pullPolicy: IfNotPresent
    # Overrides the image tag whose default is the chart appVersion.
    tag: ""

  imagePullSecrets: []

  autoscaling:
    enabled: false

  podAnnotations: {}

  podSecurityContext: {}
    # fsGroup: 2000

  securityContext: {}
    # capabilities:
    #   drop:
    #   - ALL
    # readOnlyRootFilesystem: true
    # runAsNonRoot: true
    # runAsUser: 1000

  resources: {}
    # limits:
    #   cpu: 100m
    #   memory: 128Mi
    # requests:
    #   cpu: 100m
    #   memory: 128Mi

  nodeSelector: {}

  tolerations: []

  affinity: {}
"""

DEPLOYMENT = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: {{ include "<CHARTNAME>.fullname" . }}-<MANIFEST_NAME>
  labels:
    {{- include "<CHARTNAME>.labels" . | nindent 4 }}
spec:
  {{- if not .Values.<MANIFEST_NAME>_deployment.autoscaling.enabled }}
  replicas: {{ .Values.<MANIFEST_NAME>_deployment.replicaCount }}
  {{- end }}
  selector:
    matchLabels:
      app.kubernetes.io/name: {{ include "<CHARTNAME>.name" . }}-<MANIFEST_NAME>
      app.kubernetes.io/instance: {{ .Release.Name }}
  template:
    metadata:
      {{- with .Values.<MANIFEST_NAME>_deployment.podAnnotations }}
      annotations:
        {{- toYaml . | nindent 8 }}
      {{- end }}
      labels:
        app.kubernetes.io/name: {{ include "<CHARTNAME>.name" . }}-<MANIFEST_NAME>
        app.kubernetes.io/instance: {{ .Release.Name }}
    spec:
      {{- with .Values.<MANIFEST_NAME>_deployment.imagePullSecrets }}
      imagePullSecrets:
        {{- toYaml . | nindent 8 }}
      {{- end }}
      serviceAccountName: {{ include "<CHARTNAME>.serviceAccountName" . }}
      securityContext:
        {{- toYaml .Values.<MANIFEST_NAME>_deployment.podSecurityContext | nindent 8 }}
      containers:
        - name: {{ .Chart.Name }}-<MANIFEST_NAME>
          securityContext:
            {{- toYaml .Values.<MANIFEST_NAME>_deployment.securityContext | nindent 12 }}
          image: "{{ .Values.<MANIFEST_NAME>_deployment.image.repository }}:{{ .Values.<MANIFEST_NAME>_deployment.image.tag | default .Chart.AppVersion }}"
          imagePullPolicy: {{ .Values.<MANIFEST_NAME>_deployment.image.pullPolicy }}
          ports:
            - name: http
              containerPort: 80
              protocol: TCP
          livenessProbe:
            httpGet:
              path: /
              port: http
          readinessProbe:
            httpGet:
              path: /
              port: http
          resources:
            {{- toYaml .Values.<MANIFEST_NAME>_deployment.resources | nindent 12 }}
      {{- with .Values.<MANIFEST_NAME>_deployment.nodeSelector }}
      nodeSelector:
        {{- toYaml . | nindent 8 }}
      {{- end }}
      {{- with .Values.<MANIFEST_NAME>_deployment.affinity }}
      affinity:
        {{- toYaml . | nindent 8 }}
      {{- end }}
      {{- with .Values.<MANIFEST_NAME>_deployment.tolerations }}
      tolerations:
        {{- toYaml . | nindent 8 }}
      {{- end }}
"""
