"""Static bodies for the module-scoped chart templates.

Every manifest body is Helm template syntax with ``<MODULE_NAME>`` standing in
for the module.  The ``*_VALUES`` fragments are written at column zero; the
registry nests them under the module's top-level key in ``values.yaml``.
"""

DEPLOYMENT_VALUES = """\
replicaCount: 1

image:
  repository: nginx
  pullPolicy: IfNotPresent
  # Overrides the image tag whose default is the chart appVersion.
  tag: ""

imagePullSecrets: []

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
  # We usually recommend not to specify default resources and to leave this as a conscious
  # choice for the user. This also increases chances charts run on environments with little
  # resources, such as Minikube. If you do want to specify resources, uncomment the following
  # lines, adjust them as necessary, and remove the curly braces after 'resources:'.
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
  name: {{ include "<MODULE_NAME>.fullname" . }}
  labels:
    {{- include "<MODULE_NAME>.labels" . | nindent 4 }}
spec:
  {{- if not .Values.<MODULE_NAME>.autoscaling.enabled }}
  replicas: {{ .Values.<MODULE_NAME>.replicaCount }}
  {{- end }}
  selector:
    matchLabels:
      {{- include "<MODULE_NAME>.selectorLabels" . | nindent 6 }}
  template:
    metadata:
      {{- with .Values.<MODULE_NAME>.podAnnotations }}
      annotations:
        {{- toYaml . | nindent 8 }}
      {{- end }}
      labels:
        {{- include "<MODULE_NAME>.selectorLabels" . | nindent 8 }}
    spec:
      {{- with .Values.<MODULE_NAME>.imagePullSecrets }}
      imagePullSecrets:
        {{- toYaml . | nindent 8 }}
      {{- end }}
      serviceAccountName: {{ include "<MODULE_NAME>.serviceAccountName" . }}
      securityContext:
        {{- toYaml .Values.<MODULE_NAME>.podSecurityContext | nindent 8 }}
      containers:
        - name: {{ .Chart.Name }}-<MODULE_NAME>
          securityContext:
            {{- toYaml .Values.<MODULE_NAME>.securityContext | nindent 12 }}
          image: "{{ .Values.<MODULE_NAME>.image.repository }}:{{ .Values.<MODULE_NAME>.image.tag | default .Chart.AppVersion }}"
          imagePullPolicy: {{ .Values.<MODULE_NAME>.image.pullPolicy }}
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
            {{- toYaml .Values.<MODULE_NAME>.resources | nindent 12 }}
      {{- with .Values.<MODULE_NAME>.nodeSelector }}
      nodeSelector:
        {{- toYaml . | nindent 8 }}
      {{- end }}
      {{- with .Values.<MODULE_NAME>.affinity }}
      affinity:
        {{- toYaml . | nindent 8 }}
      {{- end }}
      {{- with .Values.<MODULE_NAME>.tolerations }}
      tolerations:
        {{- toYaml . | nindent 8 }}
      {{- end }}
"""

SERVICE_VALUES = """\
service:
  type: ClusterIP
  port: 80
"""

SERVICE = """\
apiVersion: v1
kind: Service
metadata:
  name: {{ include "<MODULE_NAME>.fullname" . }}
  labels:
    {{- include "<MODULE_NAME>.labels" . | nindent 4 }}
spec:
  type: {{ .Values.<MODULE_NAME>.service.type }}
  ports:
    - port: {{ .Values.<MODULE_NAME>.service.port }}
      targetPort: http
      protocol: TCP
      name: http
  selector:
    app.kubernetes.io/name: {{ include "<MODULE_NAME>.name" . }}-<MODULE_NAME>
    app.kubernetes.io/instance: {{ .Release.Name }}
"""

SERVICE_ACCOUNT_VALUES = """\
serviceAccount:
  # Specifies whether a service account should be created
  create: true
  # Annotations to add to the service account
  annotations: {}
  # The name of the service account to use.
  # If not set and create is true, a name is generated using the fullname template
  name: ""
"""

SERVICE_ACCOUNT = """\
{{- if .Values.<MODULE_NAME>.serviceAccount.create -}}
apiVersion: v1
kind: ServiceAccount
metadata:
  name: {{ include "<MODULE_NAME>.serviceAccountName" . }}
  labels:
    {{- include "<MODULE_NAME>.labels" . | nindent 4 }}
  {{- with .Values.<MODULE_NAME>.serviceAccount.annotations }}
  annotations:
    {{- toYaml . | nindent 4 }}
  {{- end }}
{{- end }}
"""

INGRESS_VALUES = """\
ingress:
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
{{- if .Values.<MODULE_NAME>.ingress.enabled -}}
{{- $fullName := include "<MODULE_NAME>.fullname" . -}}
{{- $svcPort := .Values.<MODULE_NAME>.service.port -}}
{{- if and .Values.<MODULE_NAME>.ingress.className (not (semverCompare ">=1.18-0" .Capabilities.KubeVersion.GitVersion)) }}
  {{- if not (hasKey .Values.<MODULE_NAME>.ingress.annotations "kubernetes.io/ingress.class") }}
  {{- $_ := set .Values.<MODULE_NAME>.ingress.annotations "kubernetes.io/ingress.class" .Values.<MODULE_NAME>.ingress.className}}
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
  name: {{ $fullName }}
  labels:
    {{- include "<MODULE_NAME>.labels" . | nindent 4 }}
  {{- with .Values.<MODULE_NAME>.ingress.annotations }}
  annotations:
    {{- toYaml . | nindent 4 }}
  {{- end }}
spec:
  {{- if and .Values.<MODULE_NAME>.ingress.className (semverCompare ">=1.18-0" .Capabilities.KubeVersion.GitVersion) }}
  ingressClassName: {{ .Values.<MODULE_NAME>.ingress.className }}
  {{- end }}
  {{- if .Values.<MODULE_NAME>.ingress.tls }}
  tls:
    {{- range .Values.<MODULE_NAME>.ingress.tls }}
    - hosts:
        {{- range .hosts }}
        - {{ . | quote }}
        {{- end }}
      secretName: {{ .secretName }}
    {{- end }}
  {{- end }}
  rules:
    {{- range .Values.<MODULE_NAME>.ingress.hosts }}
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
                name: {{ $fullName }}
                port:
                  number: {{ $svcPort }}
              {{- else }}
              serviceName: {{ $fullName }}
              servicePort: {{ $svcPort }}
              {{- end }}
          {{- end }}
    {{- end }}
{{- end }}
"""

HPA_VALUES = """\
autoscaling:
  enabled: false
  minReplicas: 1
  maxReplicas: 100
  targetCPUUtilizationPercentage: 80
  # targetMemoryUtilizationPercentage: 80
"""

HPA = """\
{{- if .Values.<MODULE_NAME>.autoscaling.enabled }}
apiVersion: autoscaling/v2
kind: HorizontalPodAutoscaler
metadata:
  name: {{ include "<MODULE_NAME>.fullname" . }}
  labels:
    {{- include "<MODULE_NAME>.labels" . | nindent 4 }}
spec:
  scaleTargetRef:
    apiVersion: apps/v1
    kind: Deployment
    name: {{ include "<MODULE_NAME>.fullname" . }}
  minReplicas: {{ .Values.<MODULE_NAME>.autoscaling.minReplicas }}
  maxReplicas: {{ .Values.<MODULE_NAME>.autoscaling.maxReplicas }}
  metrics:
    {{- if .Values.<MODULE_NAME>.autoscaling.targetCPUUtilizationPercentage }}
    - type: Resource
      resource:
        name: cpu
        target:
          type: Utilization
          averageUtilization: {{ .Values.<MODULE_NAME>.autoscaling.targetCPUUtilizationPercentage }}
    {{- end }}
    {{- if .Values.<MODULE_NAME>.autoscaling.targetMemoryUtilizationPercentage }}
    - type: Resource
      resource:
        name: memory
        target:
          type: Utilization
          averageUtilization: {{ .Values.<MODULE_NAME>.autoscaling.targetMemoryUtilizationPercentage }}
    {{- end }}
{{- end }}
"""

HELPERS_VALUES = """\
nameOverride: ""
fullnameOverride: ""
"""

HELPERS = """\
{{/*
Expand the name of the chart.
*/}}
{{- define "<MODULE_NAME>.name" -}}
{{- default .Chart.Name .Values.<MODULE_NAME>.nameOverride | trunc 63 | trimSuffix "-" }}
{{- end }}

{{/*
Create a default fully qualified app name.
We truncate at 63 chars because some Kubernetes name fields are limited to this (by the DNS naming spec).
If release name contains chart name it will be used as a full name.
*/}}
{{- define "<MODULE_NAME>.fullname" -}}
{{- if .Values.<MODULE_NAME>.fullnameOverride }}
{{- .Values.<MODULE_NAME>.fullnameOverride | trunc 63 | trimSuffix "-" }}
{{- else }}
{{- $name := default .Chart.Name .Values.<MODULE_NAME>.nameOverride }}
{{- if contains $name .Release.Name }}
{{- printf "%s-%s" .Release.Name "<MODULE_NAME>" | trunc 63 | trimSuffix "-" }}
{{- else }}
{{- printf "%s-%s-%s" .Release.Name $name "<MODULE_NAME>" | trunc 63 | trimSuffix "-" }}
{{- end }}
{{- end }}
{{- end }}

{{/*
Create chart name and version as used by the chart label.
*/}}
{{- define "<MODULE_NAME>.chart" -}}
{{- printf "%s-%s" .Chart.Name .Chart.Version | replace "+" "_" | trunc 63 | trimSuffix "-" }}
{{- end }}

{{/*
Common labels
*/}}
{{- define "<MODULE_NAME>.labels" -}}
helm.sh/chart: {{ include "<MODULE_NAME>.chart" . }}
{{ include "<MODULE_NAME>.selectorLabels" . }}
{{- if .Chart.AppVersion }}
app.kubernetes.io/version: {{ .Chart.AppVersion | quote }}
{{- end }}
app.kubernetes.io/managed-by: {{ .Release.Service }}
{{- end }}

{{/*
Selector labels
*/}}
{{- define "<MODULE_NAME>.selectorLabels" -}}
app.kubernetes.io/name: {{ include "<MODULE_NAME>.name" . }}-<MODULE_NAME>
app.kubernetes.io/instance: {{ .Release.Name }}
{{- end }}

{{/*
Create the name of the service account to use
*/}}
{{- define "<MODULE_NAME>.serviceAccountName" -}}
{{- if .Values.<MODULE_NAME>.serviceAccount.create }}
{{- default (include "<MODULE_NAME>.fullname" .) .Values.<MODULE_NAME>.serviceAccount.name }}
{{- else }}
{{- default "default" .Values.<MODULE_NAME>.serviceAccount.name }}
{{- end }}
{{- end }}
"""

NOTES = """\
1. Get the application URL by running these commands:
{{- if .Values.<MODULE_NAME>.ingress.enabled }}
{{- range $host := .Values.<MODULE_NAME>.ingress.hosts }}
  {{- range .paths }}
  http{{ if $.Values.<MODULE_NAME>.ingress.tls }}s{{ end }}://{{ $host.host }}{{ .path }}
  {{- end }}
{{- end }}
{{- else if contains "NodePort" .Values.<MODULE_NAME>.service.type }}
  export NODE_PORT=$(kubectl get --namespace {{ .Release.Namespace }} -o jsonpath="{.spec.ports[0].nodePort}" services {{ include "<MODULE_NAME>.fullname" . }})
  export NODE_IP=$(kubectl get nodes --namespace {{ .Release.Namespace }} -o jsonpath="{.items[0].status.addresses[0].address}")
  echo http://$NODE_IP:$NODE_PORT
{{- else if contains "LoadBalancer" .Values.<MODULE_NAME>.service.type }}
     NOTE: It may take a few minutes for the LoadBalancer IP to be available.
           You can watch the status of by running 'kubectl get --namespace {{ .Release.Namespace }} svc -w {{ include "<MODULE_NAME>.fullname" . }}'
  export SERVICE_IP=$(kubectl get svc --namespace {{ .Release.Namespace }} {{ include "<MODULE_NAME>.fullname" . }} --template "{{"{{ range (index .status.loadBalancer.ingress 0) }}{{.}}{{ end }}"}}")
  echo http://$SERVICE_IP:{{ .Values.<MODULE_NAME>.service.port }}
{{- else if contains "ClusterIP" .Values.<MODULE_NAME>.service.type }}
  export POD_NAME=$(kubectl get pods --namespace {{ .Release.Namespace }} -l "app.kubernetes.io/name={{ include "<MODULE_NAME>.name" . }}-<MODULE_NAME>,app.kubernetes.io/instance={{ .Release.Name }}" -o jsonpath="{.items[0].metadata.name}")
  export CONTAINER_PORT=$(kubectl get pod --namespace {{ .Release.Namespace }} $POD_NAME -o jsonpath="{.spec.containers[0].ports[0].containerPort}")
  echo "Visit http://127.0.0.1:8080 to use your application"
  kubectl --namespace {{ .Release.Namespace }} port-forward $POD_NAME 8080:$CONTAINER_PORT
{{- end }}
"""

TEST_CONNECTION = """\
apiVersion: v1
kind: Pod
metadata:
  name: "{{ include "<MODULE_NAME>.fullname" . }}-test-connection"
  labels:
    {{- include "<MODULE_NAME>.labels" . | nindent 4 }}
  annotations:
    "helm.sh/hook": test
spec:
  containers:
    - name: wget
      image: busybox
      command: ['wget']
      args: ['{{ include "<MODULE_NAME>.fullname" . }}:{{ .Values.<MODULE_NAME>.service.port }}']
  restartPolicy: Never
"""
